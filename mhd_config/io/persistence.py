"""Writers and readers for persisted configuration snapshots."""

from __future__ import annotations

import logging
from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq
import yaml

from mhd_config.config.options import coerce_float, coerce_unsigned
from mhd_config.config.resolver import load_document
from mhd_config.config.types import ResolvedConfig
from mhd_config.errors import ConfigSourceError, IOWriteError
from mhd_config.io.paths import params_path, resolved_snapshot_path
from mhd_config.io.schemas import (
    PARAMS_FIELDS,
    PARAMS_KEYS,
    RESOLVED_CONFIG_SCHEMA,
    RESOLVED_SNAPSHOT_SCHEMA_VERSION,
)

logger = logging.getLogger(__name__)


def params_payload(config: ResolvedConfig) -> dict[str, int | float]:
    """Return the ``params.yaml`` mapping in persisted key order."""
    return {
        key: getattr(getattr(config, group), field_name)
        for key, group, field_name in PARAMS_FIELDS
    }


def persist_params(config: ResolvedConfig, target_dir: Path) -> Path:
    """Write ``params.yaml`` into *target_dir*, replacing any existing file.

    The directory must already exist. Floats are written in their shortest
    round-trip form, so :func:`read_params` recovers them exactly.
    """
    path = params_path(target_dir)
    text = yaml.safe_dump(params_payload(config), sort_keys=False, default_flow_style=False)
    try:
        path.write_text(text)
    except OSError as exc:
        raise IOWriteError(path, exc.strerror or str(exc)) from exc
    logger.info("Wrote %s", path)
    return path


def read_params(path: Path) -> dict[str, int | float]:
    """Read back a ``params.yaml`` written by :func:`persist_params`."""
    document = load_document(path)
    missing = [key for key in PARAMS_KEYS if key not in document]
    if missing:
        raise ConfigSourceError(path, f"missing keys: {', '.join(missing)}")
    params: dict[str, int | float] = {}
    for key, _, field_name in PARAMS_FIELDS:
        if field_name == "grid_length":
            params[key] = coerce_unsigned(document[key], key)
        else:
            params[key] = coerce_float(document[key], key)
    return params


def write_resolved_snapshot(config: ResolvedConfig, target_dir: Path) -> Path:
    """Write every resolved and derived field as a one-row Parquet table."""
    path = resolved_snapshot_path(target_dir)
    row = {"schema_version": RESOLVED_SNAPSHOT_SCHEMA_VERSION, **config.to_dict()}
    table = pa.Table.from_pylist([row], schema=RESOLVED_CONFIG_SCHEMA)
    try:
        pq.write_table(table, path)
    except OSError as exc:
        raise IOWriteError(path, str(exc)) from exc
    logger.info("Wrote %s", path)
    return path


def read_resolved_snapshot(path: Path) -> dict[str, object]:
    """Read the single row of a resolved snapshot back into a dict."""
    try:
        table = pq.read_table(path)
    except (OSError, pa.ArrowInvalid) as exc:
        raise ConfigSourceError(path, str(exc)) from exc
    rows = table.to_pylist()
    if len(rows) != 1:
        raise ConfigSourceError(path, f"expected exactly one row, found {len(rows)}")
    return rows[0]
