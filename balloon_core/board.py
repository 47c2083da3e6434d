from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from .config import GameConfig
from .errors import InvalidDimensionsError

Balloon = str  # one of COLORS, NONE, or INVALID
Coord = Tuple[int, int]

RED: Balloon = '^'
BLUE: Balloon = '='
GREEN: Balloon = 'o'
YELLOW: Balloon = '+'
NONE: Balloon = '.'
INVALID: Balloon = '?'  # returned for out-of-range reads, never stored

COLORS: Tuple[Balloon, ...] = (RED, BLUE, GREEN, YELLOW)
VALID_CELLS = frozenset(COLORS + (NONE,))


@dataclass
class Snapshot:
    """One board state: a row-major grid of balloons, the score and the previous snapshot's handle."""
    rows: int
    cols: int
    grid: List[Balloon]  # row-major, length == rows * cols
    score: int = 0
    previous: Optional[int] = field(default=None, compare=False)

    @classmethod
    def create(cls, rows: int, cols: int, config: Optional[GameConfig] = None) -> 'Snapshot':
        """Allocates an empty board; raises InvalidDimensionsError on bad sizes."""
        cfg = config or GameConfig()
        if not cfg.accepts(rows, cols):
            raise InvalidDimensionsError(rows, cols, cfg.max_rows, cfg.max_cols)
        return cls(rows=rows, cols=cols, grid=[NONE] * (rows * cols))

    def in_bounds(self, r: int, c: int) -> bool:
        return 0 <= r < self.rows and 0 <= c < self.cols

    def index(self, r: int, c: int) -> int:
        """Calculates the 1D index for a given row and column."""
        return r * self.cols + c

    def get(self, r: int, c: int) -> Balloon:
        """Gets the balloon at (r, c), or INVALID when out of range."""
        if not self.in_bounds(r, c):
            return INVALID
        return self.grid[self.index(r, c)]

    def set(self, r: int, c: int, balloon: Balloon) -> None:
        """Writes a balloon at (r, c); out-of-range writes are ignored."""
        if not self.in_bounds(r, c):
            return
        self.grid[self.index(r, c)] = balloon

    def copy(self) -> 'Snapshot':
        """Same dimensions, grid and score. The caller links `previous`."""
        return Snapshot(rows=self.rows, cols=self.cols, grid=list(self.grid), score=self.score)

    def coords(self) -> Iterable[Coord]:
        """Iterates over all coordinates on the board, row by row."""
        for r in range(self.rows):
            for c in range(self.cols):
                yield (r, c)

    def rows_as_strings(self) -> List[str]:
        return [''.join(self.grid[r * self.cols:(r + 1) * self.cols]) for r in range(self.rows)]

    def balloon_count(self) -> int:
        return sum(1 for b in self.grid if b != NONE)

    def pop_cluster(self, r: int, c: int, balloon: Balloon) -> int:
        """
        Clears the 4-connected cluster of `balloon` containing (r, c) and returns its size.
        Neighbours are visited up, left, right, down. An explicit stack replaces
        recursion so large boards cannot hit the interpreter recursion limit.
        """
        if balloon not in COLORS:
            # Clearing NONE into NONE would never terminate.
            return 0
        popped = 0
        stack: List[Coord] = [(r, c)]
        while stack:
            cr, cc = stack.pop()
            if not self.in_bounds(cr, cc):
                continue
            if self.grid[self.index(cr, cc)] != balloon:
                continue
            self.grid[self.index(cr, cc)] = NONE
            popped += 1
            # Pushed in reverse so they are visited up, left, right, down.
            stack.append((cr + 1, cc))
            stack.append((cr, cc + 1))
            stack.append((cr, cc - 1))
            stack.append((cr - 1, cc))
        return popped


def get(snapshot: Optional[Snapshot], r: int, c: int) -> Balloon:
    """Null-tolerant read: a missing snapshot reads as INVALID everywhere."""
    if snapshot is None:
        return INVALID
    return snapshot.get(r, c)


def set_balloon(snapshot: Optional[Snapshot], r: int, c: int, balloon: Balloon) -> None:
    if snapshot is None:
        return
    snapshot.set(r, c, balloon)
