from pathlib import Path

from mhd_config.io.paths import params_path, resolved_snapshot_path


def test_params_path() -> None:
    assert params_path(Path("out")) == Path("out/params.yaml")


def test_resolved_snapshot_path() -> None:
    assert resolved_snapshot_path(Path("out")) == Path("out/resolved_config.parquet")
