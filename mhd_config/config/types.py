"""Resolved configuration dataclasses.

Every group is a frozen dataclass. Derived values are ``init=False`` fields
filled in ``__post_init__`` so they can never be passed in independently.
"""

from __future__ import annotations

import math
from dataclasses import InitVar, asdict, dataclass, field, fields
from pathlib import Path

__all__ = [
    "GridConfig",
    "TimeConfig",
    "PhysicsConfig",
    "InitialConditionConfig",
    "OutputConfig",
    "KernelConfig",
    "WriterConfig",
    "GraphicsConfig",
    "ResolvedConfig",
]

# ---------------------------------------------------------------------------
# Groups with derived fields
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class GridConfig:
    """Spectral grid resolution and the quantities derived from it."""

    grid_length: int
    dealias_coef: float
    grid_step: float = field(init=False)
    lambda_: float = field(init=False)
    """Normalisation factor 1 / grid_length**2."""
    dealias_wave_number: int = field(init=False)

    def __post_init__(self) -> None:
        if self.grid_length < 1:
            raise ValueError("grid_length must be >= 1")
        object.__setattr__(self, "grid_step", 2.0 * math.pi / self.grid_length)
        object.__setattr__(self, "lambda_", 1.0 / (self.grid_length * self.grid_length))
        object.__setattr__(
            self,
            "dealias_wave_number",
            max(0, math.floor(self.grid_length * self.dealias_coef / 2.0)),
        )


@dataclass(frozen=True)
class KernelConfig:
    """Kernel launch layout; linear_length is grid_length**2 // shared_length."""

    block_dim_x: int
    block_dim_y: int
    shared_length: int
    grid_length: InitVar[int]
    linear_length: int = field(init=False)

    def __post_init__(self, grid_length: int) -> None:
        if self.shared_length < 1:
            raise ValueError("shared_length must be >= 1")
        object.__setattr__(self, "linear_length", grid_length * grid_length // self.shared_length)


@dataclass(frozen=True)
class OutputConfig:
    """Output schedule."""

    output_step: float
    output_start: float
    output_stop: float


# ---------------------------------------------------------------------------
# Plain groups
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TimeConfig:
    """Run length and time-step control."""

    simulation_time: float
    cfl_number: float
    max_time_step: float


@dataclass(frozen=True)
class PhysicsConfig:
    """Diffusion coefficients of the MHD equations."""

    viscosity: float
    resistivity: float


@dataclass(frozen=True)
class InitialConditionConfig:
    """Energies and spectral peak of the initial fields."""

    kinetic_energy: float
    magnetic_energy: float
    average_wave_number: int


@dataclass(frozen=True)
class WriterConfig:
    """Which fields the simulation writer persists."""

    save_data: bool
    save_png: bool
    save_vorticity: bool
    save_current: bool
    save_stream: bool
    save_potential: bool


@dataclass(frozen=True)
class GraphicsConfig:
    """Live rendering window settings."""

    show_graphics: bool
    textures_count: int
    window_width: int
    window_height: int
    color_map: str


# ---------------------------------------------------------------------------
# Top-level record
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ResolvedConfig:
    """Every parameter of one simulation run, grouped by role."""

    grid: GridConfig
    time: TimeConfig
    physics: PhysicsConfig
    initial: InitialConditionConfig
    output: OutputConfig
    kernel: KernelConfig
    writer: WriterConfig
    graphics: GraphicsConfig

    def to_dict(self) -> dict[str, int | float | bool | str]:
        """Flatten all groups into one ``{field_name: value}`` mapping."""
        flat: dict[str, int | float | bool | str] = {}
        for group in fields(self):
            flat.update(asdict(getattr(self, group.name)))
        return flat

    def format_summary(self) -> str:
        """Return the human-readable parameter summary."""
        from mhd_config.report import format_summary

        return format_summary(self)

    def persist(self, target_dir: Path) -> Path:
        """Write ``params.yaml`` into *target_dir* and return its path."""
        from mhd_config.io.persistence import persist_params

        return persist_params(self, target_dir)
