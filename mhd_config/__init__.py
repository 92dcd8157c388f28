"""Configuration resolver for the 2-D spectral MHD solver."""

from mhd_config.config import (
    DEFAULT_TABLE,
    ResolvedConfig,
    load_config,
    load_document,
    resolve_config,
)
from mhd_config.errors import ConfigError, ConfigSourceError, ConfigTypeError, IOWriteError
from mhd_config.io.persistence import persist_params, read_params, write_resolved_snapshot
from mhd_config.report import format_summary

__all__ = [
    "ConfigError",
    "ConfigSourceError",
    "ConfigTypeError",
    "DEFAULT_TABLE",
    "IOWriteError",
    "ResolvedConfig",
    "format_summary",
    "load_config",
    "load_document",
    "persist_params",
    "read_params",
    "resolve_config",
    "write_resolved_snapshot",
]
