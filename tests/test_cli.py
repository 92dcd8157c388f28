"""Tests for cli.py: argument parsing and output."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from mhd_config.cli import main
from mhd_config.io.persistence import read_params


def _write_config(tmp_path: Path, text: str) -> Path:
    config_file = tmp_path / "config.yaml"
    config_file.write_text(text)
    return config_file


def test_main_prints_summary(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config_file = _write_config(tmp_path, "GridLength: 64\nnu: 0.001\n")
    main([str(config_file)])
    out = capsys.readouterr().out
    assert out.startswith("Simulation parameters:\n")
    assert "  Grid Length = 64" in out
    assert "  nu          = 0.001" in out


def test_main_json_output(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config_file = _write_config(tmp_path, "GridLength: 64\n")
    main([str(config_file), "--json"])
    payload = json.loads(capsys.readouterr().out)
    assert payload["grid_length"] == 64
    assert payload["lambda_"] == 1.0 / 4096
    assert payload["block_dim_y"] == payload["block_dim_x"]


def test_main_persists_into_new_out_dir(tmp_path: Path) -> None:
    config_file = _write_config(tmp_path, "GridLength: 32\n")
    out_dir = tmp_path / "run" / "001"
    main([str(config_file), "--out-dir", str(out_dir), "--snapshot"])
    assert read_params(out_dir / "params.yaml")["gridLength"] == 32
    assert (out_dir / "resolved_config.parquet").exists()


def test_main_bad_type_exits(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config_file = _write_config(tmp_path, "GridLength: abc\n")
    with pytest.raises(SystemExit) as excinfo:
        main([str(config_file)])
    assert excinfo.value.code == 2
    assert "GridLength" in capsys.readouterr().err


def test_main_missing_config_exits(tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        main([str(tmp_path / "missing.yaml")])


def test_main_snapshot_requires_out_dir(tmp_path: Path) -> None:
    config_file = _write_config(tmp_path, "")
    with pytest.raises(SystemExit):
        main([str(config_file), "--snapshot"])
