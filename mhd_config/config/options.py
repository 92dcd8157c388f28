"""Option descriptors and value coercion for configuration documents.

``DEFAULT_TABLE`` lists every recognised document key together with the
type it is coerced to, its default, and the ``ResolvedConfig`` group/field
it fills. The resolver walks this table instead of carrying one getter per
option.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass
from types import MappingProxyType
from typing import Literal

from mhd_config.config import constants
from mhd_config.errors import ConfigTypeError

OptionKind = Literal["unsigned", "int", "float", "bool", "str"]

# ---------------------------------------------------------------------------
# Coercion helpers
# ---------------------------------------------------------------------------


def coerce_bool(raw: object, key: str) -> bool:
    """Coerce raw value to bool with strict string-check."""
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        normalized = raw.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
    raise ConfigTypeError(key, raw, "a boolean value")


def coerce_int(raw: object, key: str) -> int:
    """Coerce raw value to int; rejects booleans and non-integer floats."""
    if isinstance(raw, bool):
        raise ConfigTypeError(key, raw, "an integer value")
    if isinstance(raw, float):
        if not math.isfinite(raw) or raw != int(raw):
            raise ConfigTypeError(key, raw, "an integer value")
        return int(raw)
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        try:
            return int(raw.strip())
        except ValueError as exc:
            raise ConfigTypeError(key, raw, "an integer value") from exc
    raise ConfigTypeError(key, raw, "an integer value")


def coerce_unsigned(raw: object, key: str) -> int:
    """Coerce raw value to a non-negative int."""
    value = coerce_int(raw, key)
    if value < 0:
        raise ConfigTypeError(key, raw, "a non-negative integer value")
    return value


def coerce_float(raw: object, key: str) -> float:
    """Coerce raw value to float; rejects booleans.

    Strings are parsed too: YAML 1.1 loads exponent literals without a
    decimal point (``1e-3``) as strings.
    """
    if isinstance(raw, bool):
        raise ConfigTypeError(key, raw, "a float value")
    if isinstance(raw, (int, float)):
        try:
            return float(raw)
        except OverflowError as exc:
            raise ConfigTypeError(key, raw, "a float value") from exc
    if isinstance(raw, str):
        try:
            return float(raw.strip())
        except ValueError as exc:
            raise ConfigTypeError(key, raw, "a float value") from exc
    raise ConfigTypeError(key, raw, "a float value")


def coerce_str(raw: object, key: str) -> str:
    """Coerce raw value to str; rejects booleans."""
    if isinstance(raw, bool):
        raise ConfigTypeError(key, raw, "a string-coercible value")
    if isinstance(raw, (str, int, float)):
        return str(raw)
    raise ConfigTypeError(key, raw, "a string-coercible value")


COERCERS: MappingProxyType[str, Callable[[object, str], object]] = MappingProxyType(
    {
        "unsigned": coerce_unsigned,
        "int": coerce_int,
        "float": coerce_float,
        "bool": coerce_bool,
        "str": coerce_str,
    }
)

# ---------------------------------------------------------------------------
# Descriptor table
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class OptionSpec:
    """One recognised document key."""

    key: str
    kind: OptionKind
    default: object
    """Fallback value; ``None`` means the value is derived when absent."""
    group: str
    field: str

    def coerce(self, raw: object) -> object:
        return COERCERS[self.kind](raw, self.key)


DEFAULT_TABLE: tuple[OptionSpec, ...] = (
    # Grid
    OptionSpec("GridLength", "unsigned", constants.GRID_LENGTH, "grid", "grid_length"),
    OptionSpec("DealiasingCoef", "float", constants.DEALIASING_COEF, "grid", "dealias_coef"),
    # Time
    OptionSpec("Time", "float", constants.SIMULATION_TIME, "time", "simulation_time"),
    OptionSpec("CFL", "float", constants.CFL_NUMBER, "time", "cfl_number"),
    OptionSpec("MaxTimeStep", "float", constants.MAX_TIME_STEP, "time", "max_time_step"),
    # Physics
    OptionSpec("nu", "float", constants.VISCOSITY, "physics", "viscosity"),
    OptionSpec("eta", "float", constants.RESISTIVITY, "physics", "resistivity"),
    # Initial condition
    OptionSpec("KineticEnergy", "float", constants.KINETIC_ENERGY, "initial", "kinetic_energy"),
    OptionSpec("MagneticEnergy", "float", constants.MAGNETIC_ENERGY, "initial", "magnetic_energy"),
    OptionSpec(
        "AverageWN", "unsigned", constants.AVERAGE_WAVE_NUMBER, "initial", "average_wave_number"
    ),
    # Output
    OptionSpec("OutputStep", "float", constants.OUTPUT_STEP, "output", "output_step"),
    OptionSpec("OutputStart", "float", constants.OUTPUT_START, "output", "output_start"),
    OptionSpec("OutputStop", "float", None, "output", "output_stop"),
    # Kernel layout. The Y block dimension follows the DimBlockX key.
    OptionSpec("DimBlockX", "unsigned", constants.DIM_BLOCK_X, "kernel", "block_dim_x"),
    OptionSpec("DimBlockX", "unsigned", constants.DIM_BLOCK_X, "kernel", "block_dim_y"),
    OptionSpec("SharedLength", "unsigned", constants.SHARED_LENGTH, "kernel", "shared_length"),
    # Writer
    OptionSpec("SaveData", "bool", constants.SAVE_DATA, "writer", "save_data"),
    OptionSpec("SavePNG", "bool", constants.SAVE_PNG, "writer", "save_png"),
    OptionSpec("SaveVorticity", "bool", constants.SAVE_VORTICITY, "writer", "save_vorticity"),
    OptionSpec("SaveCurrent", "bool", constants.SAVE_CURRENT, "writer", "save_current"),
    OptionSpec("SaveStream", "bool", constants.SAVE_STREAM, "writer", "save_stream"),
    OptionSpec("SavePotential", "bool", constants.SAVE_POTENTIAL, "writer", "save_potential"),
    # Graphics
    OptionSpec("ShowGraphics", "bool", constants.SHOW_GRAPHICS, "graphics", "show_graphics"),
    OptionSpec("TexturesCount", "unsigned", constants.TEXTURES_COUNT, "graphics", "textures_count"),
    OptionSpec("WindowWidth", "unsigned", constants.WINDOW_WIDTH, "graphics", "window_width"),
    OptionSpec("WindowHeight", "unsigned", constants.WINDOW_HEIGHT, "graphics", "window_height"),
    OptionSpec("ColorMap", "str", constants.COLOR_MAP, "graphics", "color_map"),
)


def recognized_keys(table: tuple[OptionSpec, ...] = DEFAULT_TABLE) -> frozenset[str]:
    """Return the set of document keys the table knows about."""
    return frozenset(spec.key for spec in table)
