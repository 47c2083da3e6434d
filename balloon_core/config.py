from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_MAX_ROWS = 40
DEFAULT_MAX_COLS = 40


def env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class GameConfig:
    """Board size limits applied when a game is created."""
    max_rows: int = DEFAULT_MAX_ROWS
    max_cols: int = DEFAULT_MAX_COLS

    @classmethod
    def from_env(cls) -> 'GameConfig':
        """Reads BALLOON_MAX_ROWS / BALLOON_MAX_COLS, falling back to the defaults."""
        return cls(
            max_rows=env_int('BALLOON_MAX_ROWS', DEFAULT_MAX_ROWS),
            max_cols=env_int('BALLOON_MAX_COLS', DEFAULT_MAX_COLS),
        )

    def accepts(self, rows: int, cols: int) -> bool:
        return 0 < rows <= self.max_rows and 0 < cols <= self.max_cols
