"""Human-readable summary of a resolved configuration."""

from __future__ import annotations

from mhd_config.config.types import ResolvedConfig

VALUE_WIDTH = 13
"""Column width of the value column."""


def _format_value(value: int | float) -> str:
    if isinstance(value, float):
        return f"{value:<{VALUE_WIDTH}g}"
    return f"{value:<{VALUE_WIDTH}}"


def format_summary(config: ResolvedConfig) -> str:
    """Render the fixed three-section parameter summary.

    Labels are padded to a common width so that all values start in the
    same column. The text ends with a blank line.
    """
    sections: list[tuple[str, list[tuple[str, int | float]]]] = [
        (
            "Simulation parameters:",
            [
                ("Grid Length", config.grid.grid_length),
                ("End Time", config.time.simulation_time),
            ],
        ),
        (
            "Initial condition:",
            [
                ("Ekin", config.initial.kinetic_energy),
                ("Emag", config.initial.magnetic_energy),
            ],
        ),
        (
            "Equation coefficients:",
            [
                ("nu", config.physics.viscosity),
                ("eta", config.physics.resistivity),
            ],
        ),
    ]
    label_width = max(len(label) for _, rows in sections for label, _ in rows)

    lines: list[str] = []
    for title, rows in sections:
        lines.append(title)
        for label, value in rows:
            lines.append(f"  {label:<{label_width}} = {_format_value(value)}")
        lines.append("")
    return "\n".join(lines) + "\n"
