"""Column and key contracts for persisted configuration artifacts.

``PARAMS_FIELDS`` fixes the key layout of ``params.yaml``; the Arrow schema
fixes the columns of the full resolved snapshot. Readers and writers both
work against these definitions.
"""

from __future__ import annotations

import pyarrow as pa

RESOLVED_SNAPSHOT_SCHEMA_VERSION = 1

# ---------------------------------------------------------------------------
# params.yaml
# ---------------------------------------------------------------------------

PARAMS_FIELDS: tuple[tuple[str, str, str], ...] = (
    # (persisted key, ResolvedConfig group, field)
    ("gridLength", "grid", "grid_length"),
    ("time", "time", "simulation_time"),
    ("Ekin0", "initial", "kinetic_energy"),
    ("Emag0", "initial", "magnetic_energy"),
    ("nu", "physics", "viscosity"),
    ("eta", "physics", "resistivity"),
    ("outStep", "output", "output_step"),
    ("outStart", "output", "output_start"),
    ("outStop", "output", "output_stop"),
)

PARAMS_KEYS: tuple[str, ...] = tuple(key for key, _, _ in PARAMS_FIELDS)

# ---------------------------------------------------------------------------
# Full resolved snapshot
# ---------------------------------------------------------------------------

RESOLVED_CONFIG_SCHEMA = pa.schema(
    [
        ("schema_version", pa.int64()),
        # grid
        ("grid_length", pa.int64()),
        ("dealias_coef", pa.float64()),
        ("grid_step", pa.float64()),
        ("lambda_", pa.float64()),
        ("dealias_wave_number", pa.int64()),
        # time
        ("simulation_time", pa.float64()),
        ("cfl_number", pa.float64()),
        ("max_time_step", pa.float64()),
        # physics
        ("viscosity", pa.float64()),
        ("resistivity", pa.float64()),
        # initial condition
        ("kinetic_energy", pa.float64()),
        ("magnetic_energy", pa.float64()),
        ("average_wave_number", pa.int64()),
        # output
        ("output_step", pa.float64()),
        ("output_start", pa.float64()),
        ("output_stop", pa.float64()),
        # kernel
        ("block_dim_x", pa.int64()),
        ("block_dim_y", pa.int64()),
        ("shared_length", pa.int64()),
        ("linear_length", pa.int64()),
        # writer
        ("save_data", pa.bool_()),
        ("save_png", pa.bool_()),
        ("save_vorticity", pa.bool_()),
        ("save_current", pa.bool_()),
        ("save_stream", pa.bool_()),
        ("save_potential", pa.bool_()),
        # graphics
        ("show_graphics", pa.bool_()),
        ("textures_count", pa.int64()),
        ("window_width", pa.int64()),
        ("window_height", pa.int64()),
        ("color_map", pa.string()),
    ]
)
