"""Build a ResolvedConfig from a configuration document.

Resolution is staged so that derived values only ever read already-resolved
inputs:

1. grid: GridLength and DealiasingCoef, then step/lambda/dealias cutoff
2. output: OutputStep, then OutputStop (or OutputStep * MAX_OUTPUTS)
3. kernel: SharedLength, then the linear length from the resolved grid
4. every remaining group, which has no ordering constraints
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

import yaml

from mhd_config.config.constants import MAX_OUTPUTS
from mhd_config.config.options import DEFAULT_TABLE, OptionSpec, recognized_keys
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
from mhd_config.errors import ConfigSourceError

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Document loading
# ---------------------------------------------------------------------------


def load_document(path: Path | str) -> dict[str, object]:
    """Load a YAML mapping from *path*.

    An empty file yields an empty mapping. Raises :exc:`ConfigSourceError`
    when the file is missing, unreadable, not valid YAML, or not a mapping.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigSourceError(path, exc.strerror or str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise ConfigSourceError(path, f"not valid UTF-8 text: {exc.reason}") from exc
    try:
        document = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigSourceError(path, f"invalid YAML: {exc}") from exc
    if document is None:
        return {}
    if not isinstance(document, dict):
        raise ConfigSourceError(path, f"top level must be a mapping, got {type(document).__name__}")
    return {str(key): value for key, value in document.items()}


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------


def _group_values(
    document: Mapping[str, object],
    specs: list[OptionSpec],
    defaulted: list[str],
) -> dict[str, object]:
    """Document > default resolution for every spec of one group."""
    values: dict[str, object] = {}
    for spec in specs:
        if spec.key in document:
            values[spec.field] = spec.coerce(document[spec.key])
        elif spec.default is not None:
            values[spec.field] = spec.default
            defaulted.append(spec.field)
    return values


def resolve_config(
    document: Mapping[str, object],
    table: tuple[OptionSpec, ...] = DEFAULT_TABLE,
) -> ResolvedConfig:
    """Resolve *document* against *table* into an immutable ResolvedConfig."""
    unknown = sorted(set(document) - recognized_keys(table))
    if unknown:
        logger.warning("Ignoring unrecognized config keys: %s", ", ".join(unknown))

    by_group: dict[str, list[OptionSpec]] = {}
    for spec in table:
        by_group.setdefault(spec.group, []).append(spec)
    defaulted: list[str] = []

    def values_for(group: str) -> dict[str, object]:
        return _group_values(document, by_group.get(group, []), defaulted)

    # Stage 1: grid and its derived quantities.
    grid = GridConfig(**values_for("grid"))

    # Stage 2: output schedule; the stop default reads the resolved step.
    output_values = values_for("output")
    if "output_stop" not in output_values:
        output_values["output_stop"] = output_values["output_step"] * MAX_OUTPUTS
        defaulted.append("output_stop")
    output = OutputConfig(**output_values)

    # Stage 3: kernel layout against the resolved grid.
    kernel = KernelConfig(**values_for("kernel"), grid_length=grid.grid_length)

    # Stage 4: independent groups.
    config = ResolvedConfig(
        grid=grid,
        time=TimeConfig(**values_for("time")),
        physics=PhysicsConfig(**values_for("physics")),
        initial=InitialConditionConfig(**values_for("initial")),
        output=output,
        kernel=kernel,
        writer=WriterConfig(**values_for("writer")),
        graphics=GraphicsConfig(**values_for("graphics")),
    )
    if defaulted:
        logger.debug("Using defaults for: %s", ", ".join(defaulted))
    return config


def load_config(
    path: Path | str,
    table: tuple[OptionSpec, ...] = DEFAULT_TABLE,
) -> ResolvedConfig:
    """Load the YAML document at *path* and resolve it."""
    config = resolve_config(load_document(path), table)
    logger.info("Resolved config from %s", path)
    return config
