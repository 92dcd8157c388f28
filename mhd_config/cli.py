"""CLI entrypoint: resolve a config document, print it, optionally persist it."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from mhd_config.config.resolver import load_config
from mhd_config.errors import ConfigError
from mhd_config.io.persistence import persist_params, write_resolved_snapshot

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="mhd-config",
        description="Resolve an MHD simulation config against built-in defaults",
    )
    parser.add_argument("config", type=Path, help="YAML config document")
    parser.add_argument(
        "--out-dir",
        type=Path,
        default=None,
        help="Directory to write params.yaml into (created if missing)",
    )
    parser.add_argument(
        "--snapshot",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Also write the full resolved config as Parquet (needs --out-dir)",
    )
    parser.add_argument(
        "--json",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Print every resolved field as JSON instead of the summary",
    )
    parser.add_argument("--log-level", choices=LOG_LEVELS, default="WARNING")
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint.

    Document values override built-in defaults; derived parameters are
    computed from the resolved values.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    if args.snapshot and args.out_dir is None:
        parser.error("--snapshot requires --out-dir")

    try:
        config = load_config(args.config)
    except (ConfigError, ValueError) as exc:
        parser.error(str(exc))

    if args.json:
        print(json.dumps(config.to_dict(), ensure_ascii=False, indent=2))
    else:
        print(config.format_summary(), end="")

    if args.out_dir is not None:
        out_dir = Path(args.out_dir)
        try:
            out_dir.mkdir(parents=True, exist_ok=True)
            persist_params(config, out_dir)
            if args.snapshot:
                write_resolved_snapshot(config, out_dir)
        except (ConfigError, OSError) as exc:
            parser.error(str(exc))


if __name__ == "__main__":
    main()
