"""Path construction helpers for persisted configuration artifacts."""

from __future__ import annotations

from pathlib import Path

from mhd_config.config.constants import PARAMS_FILENAME, RESOLVED_SNAPSHOT_FILENAME


def params_path(out_dir: Path) -> Path:
    """Return path to the persisted parameter snapshot."""
    return Path(out_dir) / PARAMS_FILENAME


def resolved_snapshot_path(out_dir: Path) -> Path:
    """Return path to the full resolved-config Parquet file."""
    return Path(out_dir) / RESOLVED_SNAPSHOT_FILENAME
