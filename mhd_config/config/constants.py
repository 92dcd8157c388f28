"""Default values for every recognised simulation option.

These are the fallbacks used when a configuration document omits a key.
Consuming modules should go through ``DEFAULT_TABLE`` in
``mhd_config.config.options`` rather than reading these names directly.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Simulation parameters
# ---------------------------------------------------------------------------

GRID_LENGTH = 128
"""Grid points per side of the periodic square domain."""

SIMULATION_TIME = 1.0
"""End time of the simulation."""

DEALIASING_COEF = 2.0 / 3.0
"""Fraction of the resolvable spectrum kept (two-thirds rule)."""

MAX_TIME_STEP = 0.01
"""Upper bound for the adaptive time step."""

CFL_NUMBER = 0.5
"""Courant-Friedrichs-Lewy ratio used to pick the time step."""

# ---------------------------------------------------------------------------
# Equation coefficients
# ---------------------------------------------------------------------------

VISCOSITY = 0.01
"""Kinematic viscosity (nu)."""

RESISTIVITY = 0.01
"""Magnetic diffusivity (eta)."""

# ---------------------------------------------------------------------------
# Initial condition
# ---------------------------------------------------------------------------

KINETIC_ENERGY = 1.0
MAGNETIC_ENERGY = 1.0
AVERAGE_WAVE_NUMBER = 10

# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

OUTPUT_STEP = 0.01
OUTPUT_START = 0.0

MAX_OUTPUTS = 100
"""Number of outputs assumed when OutputStop is absent."""

# ---------------------------------------------------------------------------
# Kernel launch layout
# ---------------------------------------------------------------------------

DIM_BLOCK_X = 32
SHARED_LENGTH = 1024

# ---------------------------------------------------------------------------
# Writer and graphics settings
# ---------------------------------------------------------------------------

SAVE_DATA = False
SAVE_PNG = False
SAVE_VORTICITY = True
SAVE_CURRENT = True
SAVE_STREAM = False
SAVE_POTENTIAL = False

SHOW_GRAPHICS = True
TEXTURES_COUNT = 2
WINDOW_WIDTH = 1200
WINDOW_HEIGHT = 600
COLOR_MAP = "Jet"

# ---------------------------------------------------------------------------
# Persisted artifacts
# ---------------------------------------------------------------------------

PARAMS_FILENAME = "params.yaml"
"""Name of the persisted parameter snapshot inside an output directory."""

RESOLVED_SNAPSHOT_FILENAME = "resolved_config.parquet"
"""Name of the full resolved-config Parquet snapshot."""
