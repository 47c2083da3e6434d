from __future__ import annotations

import random
from typing import List, Optional, Sequence

from .board import COLORS, VALID_CELLS, Balloon, Snapshot
from .config import GameConfig
from .errors import InvalidBalloonError


def fill_random(snapshot: Snapshot, rng: random.Random) -> Snapshot:
    """Fills every cell column by column, top to bottom, so the initial board is compact."""
    for j in range(snapshot.cols):
        for i in range(snapshot.rows):
            snapshot.set(i, j, rng.choice(COLORS))
    return snapshot


def deal_random(rows: int, cols: int, rng: Optional[random.Random] = None,
                seed: Optional[int] = None, config: Optional[GameConfig] = None) -> Snapshot:
    """Creates a rows x cols board filled with uniformly random colours."""
    snapshot = Snapshot.create(rows, cols, config)
    return fill_random(snapshot, rng if rng is not None else random.Random(seed))


def fill_from_matrix(snapshot: Snapshot, matrix: Sequence[Sequence[Balloon]]) -> Snapshot:
    """Copies matrix[i][j] for every cell; raises InvalidBalloonError on unknown symbols."""
    for i in range(snapshot.rows):
        try:
            row = matrix[i]
        except IndexError:
            raise InvalidBalloonError(i, 0, None) from None
        for j in range(snapshot.cols):
            try:
                value = row[j]
            except IndexError:
                raise InvalidBalloonError(i, j, None) from None
            if value not in VALID_CELLS:
                raise InvalidBalloonError(i, j, value)
            snapshot.set(i, j, value)
    return snapshot


def deal_from_matrix(matrix: Sequence[Sequence[Balloon]], rows: int, cols: int,
                     config: Optional[GameConfig] = None) -> Snapshot:
    snapshot = Snapshot.create(rows, cols, config)
    return fill_from_matrix(snapshot, matrix)


def parse_matrix(text: str) -> List[List[Balloon]]:
    """Splits a text board (one row per line, one symbol per cell, spaces ignored) into rows."""
    rows: List[List[Balloon]] = []
    for line in text.splitlines():
        cells = [ch for ch in line if not ch.isspace()]
        if cells:
            rows.append(cells)
    return rows
