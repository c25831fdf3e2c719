"""Demo configuration.

Values come from ``GRID_INVENTORY_*`` environment variables when present and
fall back to the dataclass defaults otherwise. The core model never reads
configuration; only the demo driver and ``python -m grid_inventory`` do.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from grid_inventory.inventory import DEFAULT_COLS, DEFAULT_ROWS

ENV_PREFIX = "GRID_INVENTORY_"


@dataclass(frozen=True)
class Config:
    """Settings for the demonstration driver.

    Attributes:
        rows: Number of grid rows in the demo inventory.
        cols: Number of slots per row.
        player_name: Name of the demo player.
        log_level: Minimum loguru level written to stderr.
    """

    rows: int = DEFAULT_ROWS
    cols: int = DEFAULT_COLS
    player_name: str = "Rusha"
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.rows <= 0 or self.cols <= 0:
            raise ValueError(
                f"Grid dimensions must be positive, got {self.rows}x{self.cols}"
            )


def load_config(environ: Optional[Mapping[str, str]] = None) -> Config:
    """Build a :class:`Config` from ``environ`` (defaults to ``os.environ``)."""
    env = os.environ if environ is None else environ
    defaults = Config()
    return Config(
        rows=int(env.get(f"{ENV_PREFIX}ROWS", defaults.rows)),
        cols=int(env.get(f"{ENV_PREFIX}COLS", defaults.cols)),
        player_name=env.get(f"{ENV_PREFIX}PLAYER", defaults.player_name),
        log_level=env.get(f"{ENV_PREFIX}LOG_LEVEL", defaults.log_level).upper(),
    )
