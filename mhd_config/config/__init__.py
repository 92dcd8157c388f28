"""Configuration layer: default table, resolved dataclasses and the resolver."""

from mhd_config.config.constants import MAX_OUTPUTS, PARAMS_FILENAME
from mhd_config.config.options import DEFAULT_TABLE, OptionSpec, recognized_keys
from mhd_config.config.resolver import load_config, load_document, resolve_config
from mhd_config.config.types import (
    GraphicsConfig,
    GridConfig,
    InitialConditionConfig,
    KernelConfig,
    OutputConfig,
    PhysicsConfig,
    ResolvedConfig,
    TimeConfig,
    WriterConfig,
)

__all__ = [
    "DEFAULT_TABLE",
    "GraphicsConfig",
    "GridConfig",
    "InitialConditionConfig",
    "KernelConfig",
    "MAX_OUTPUTS",
    "OptionSpec",
    "OutputConfig",
    "PARAMS_FILENAME",
    "PhysicsConfig",
    "ResolvedConfig",
    "TimeConfig",
    "WriterConfig",
    "load_config",
    "load_document",
    "recognized_keys",
    "resolve_config",
]
