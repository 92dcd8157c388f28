"""Tests for io/persistence.py: params.yaml and the Parquet snapshot."""

from __future__ import annotations

import os
from pathlib import Path

import pyarrow.parquet as pq
import pytest

from mhd_config.config.resolver import resolve_config
from mhd_config.errors import ConfigSourceError, IOWriteError
from mhd_config.io.persistence import (
    params_payload,
    persist_params,
    read_params,
    read_resolved_snapshot,
    write_resolved_snapshot,
)
from mhd_config.io.schemas import PARAMS_KEYS, RESOLVED_CONFIG_SCHEMA


def test_persist_writes_exactly_the_params_keys_in_order(tmp_path: Path) -> None:
    config = resolve_config({"GridLength": 64})
    path = persist_params(config, tmp_path)

    assert path == tmp_path / "params.yaml"
    keys = [line.split(":", 1)[0] for line in path.read_text().splitlines()]
    assert keys == list(PARAMS_KEYS)
    assert keys == [
        "gridLength",
        "time",
        "Ekin0",
        "Emag0",
        "nu",
        "eta",
        "outStep",
        "outStart",
        "outStop",
    ]


def test_persist_then_read_recovers_values_exactly(tmp_path: Path) -> None:
    config = resolve_config(
        {
            "GridLength": 96,
            "Time": 12.345678901234,
            "nu": 1e-5,
            "eta": 3.3e-7,
            "KineticEnergy": 0.1,
            "MagneticEnergy": 2.0 / 3.0,
            "OutputStep": 0.05,
            "OutputStart": 1.5,
        }
    )
    config.persist(tmp_path)

    params = read_params(tmp_path / "params.yaml")
    assert params == params_payload(config)
    assert params["gridLength"] == 96
    assert params["nu"] == 1e-5
    assert params["outStop"] == config.output.output_stop


def test_persist_overwrites_existing_file(tmp_path: Path) -> None:
    (tmp_path / "params.yaml").write_text("stale: true\n")
    persist_params(resolve_config({"GridLength": 32}), tmp_path)
    assert read_params(tmp_path / "params.yaml")["gridLength"] == 32


def test_persist_missing_directory_raises(tmp_path: Path) -> None:
    with pytest.raises(IOWriteError, match="params.yaml") as excinfo:
        persist_params(resolve_config({}), tmp_path / "absent")
    assert isinstance(excinfo.value, OSError)
    assert excinfo.value.path == tmp_path / "absent" / "params.yaml"


@pytest.mark.skipif(
    not hasattr(os, "geteuid") or os.geteuid() == 0, reason="root ignores permissions"
)
def test_persist_read_only_directory_raises(tmp_path: Path) -> None:
    read_only = tmp_path / "ro"
    read_only.mkdir()
    read_only.chmod(0o500)
    try:
        with pytest.raises(IOWriteError):
            persist_params(resolve_config({}), read_only)
    finally:
        read_only.chmod(0o700)


def test_read_params_missing_keys_raises(tmp_path: Path) -> None:
    path = tmp_path / "params.yaml"
    path.write_text("gridLength: 64\ntime: 1.0\n")
    with pytest.raises(ConfigSourceError, match="Ekin0"):
        read_params(path)


def test_resolved_snapshot_round_trip(tmp_path: Path) -> None:
    config = resolve_config({"GridLength": 64, "ColorMap": "Hot", "SaveData": True})
    path = write_resolved_snapshot(config, tmp_path)

    table = pq.read_table(path)
    assert table.schema.equals(RESOLVED_CONFIG_SCHEMA)
    assert table.num_rows == 1

    row = read_resolved_snapshot(path)
    assert row.pop("schema_version") == 1
    assert row == config.to_dict()


def test_resolved_snapshot_missing_directory_raises(tmp_path: Path) -> None:
    with pytest.raises(IOWriteError):
        write_resolved_snapshot(resolve_config({}), tmp_path / "absent")


def test_read_resolved_snapshot_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigSourceError):
        read_resolved_snapshot(tmp_path / "resolved_config.parquet")
