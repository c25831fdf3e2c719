"""Command-line entry point: ``python -m grid_inventory``."""

import argparse
from dataclasses import replace
from typing import List, Optional

from grid_inventory.config import load_config
from grid_inventory.examples.demo import run_demo
from grid_inventory.log import configure_logging


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="grid_inventory", description="Run the inventory/guild demo."
    )
    parser.add_argument("--rows", type=int, help="grid rows")
    parser.add_argument("--cols", type=int, help="slots per row")
    parser.add_argument("--player", help="demo player name")
    parser.add_argument("--log-level", help="loguru level, e.g. DEBUG")
    args = parser.parse_args(argv)

    config = load_config()
    overrides = {
        "rows": args.rows,
        "cols": args.cols,
        "player_name": args.player,
        "log_level": args.log_level.upper() if args.log_level else None,
    }
    config = replace(config, **{k: v for k, v in overrides.items() if v is not None})

    configure_logging(config.log_level)
    run_demo(config)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
