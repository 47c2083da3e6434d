from __future__ import annotations

import logging
import random
from typing import Iterator, List, Optional, Sequence

from . import rules
from .board import COLORS, Balloon, Snapshot
from .config import GameConfig
from .deal import deal_from_matrix, deal_random
from .errors import InvalidDimensionsError
from .history import History

logger = logging.getLogger(__name__)

MIN_CLUSTER = 2


def pop_score(n: int) -> int:
    """Score for popping a cluster of n balloons."""
    return n * (n - 1)


def _check_dimensions(rows: int, cols: int, config: GameConfig) -> None:
    if not config.accepts(rows, cols):
        logger.error("Rows and columns are out of range: %sx%s (max %sx%s)",
                     rows, cols, config.max_rows, config.max_cols)
        raise InvalidDimensionsError(rows, cols, config.max_rows, config.max_cols)


class BalloonGame:
    """
    A game in progress: the current board plus every earlier board needed for undo.

    Moves never modify an earlier snapshot. A pop works on a copy of the current
    board and only becomes visible once it is known to succeed.
    """

    def __init__(self, initial: Snapshot, rng: Optional[random.Random] = None,
                 config: Optional[GameConfig] = None) -> None:
        self.config = config or GameConfig()
        self.rng = rng or random.Random()
        self.history = History(initial)

    @classmethod
    def create(cls, rows: int, cols: int, seed: Optional[int] = None,
               rng: Optional[random.Random] = None, config: Optional[GameConfig] = None) -> 'BalloonGame':
        """Creates a game with a random, compact initial board."""
        cfg = config or GameConfig.from_env()
        _check_dimensions(rows, cols, cfg)
        source = rng if rng is not None else random.Random(seed)
        initial = deal_random(rows, cols, rng=source, config=cfg)
        logger.debug("created %sx%s game (seed=%s)", rows, cols, seed)
        return cls(initial, rng=source, config=cfg)

    @classmethod
    def create_from_matrix(cls, matrix: Sequence[Sequence[Balloon]], rows: int, cols: int,
                           config: Optional[GameConfig] = None) -> 'BalloonGame':
        """Creates a game whose initial board is matrix[0:rows][0:cols]."""
        cfg = config or GameConfig.from_env()
        _check_dimensions(rows, cols, cfg)
        initial = deal_from_matrix(matrix, rows, cols, config=cfg)
        return cls(initial, config=cfg)

    @property
    def current(self) -> Snapshot:
        return self.history.current

    @property
    def rows(self) -> int:
        return self.current.rows

    @property
    def cols(self) -> int:
        return self.current.cols

    def get_balloon(self, r: int, c: int) -> Balloon:
        return self.current.get(r, c)

    def score(self) -> int:
        return self.current.score

    def moves(self) -> int:
        """Number of successful pops between the initial board and the current one."""
        return self.history.depth

    def balloon_count(self) -> int:
        return self.current.balloon_count()

    def pop(self, r: int, c: int) -> int:
        """
        Pops the cluster at (r, c) if it holds at least two balloons.
        Returns the number of balloons popped (0 when nothing changed) and adds n*(n-1) to the score.
        """
        balloon = self.get_balloon(r, c)
        if balloon not in COLORS:
            return 0
        try:
            copy = self.current.copy()
        except MemoryError:
            logger.error("could not copy board for pop at (%s, %s)", r, c)
            return 0
        n = copy.pop_cluster(r, c, balloon)
        if n < MIN_CLUSTER:
            return 0
        copy.score += pop_score(n)
        self.history.push(copy)
        logger.debug("popped %s balloons at (%s, %s); score %s", n, r, c, copy.score)
        return n

    def undo(self) -> bool:
        """Restores the board and score from before the most recent pop. False at the initial board."""
        discarded = self.history.discard_head()
        if discarded is None:
            return False
        logger.debug("undo; score back to %s", self.score())
        return True

    def restart(self) -> None:
        """Undoes every pop, back to the initial board."""
        self.history.clear()

    def is_compact(self) -> bool:
        return rules.is_compact(self.current)

    def float_one_step(self) -> None:
        """Moves floating balloons up one row. Earlier snapshots are left as they were."""
        if self.is_compact():
            return
        stepped = self.current.copy()
        rules.float_one_step(stepped)
        self.history.replace_head(stepped)

    def float_frames(self) -> Iterator['BalloonGame']:
        """Floats one step at a time until compact, yielding the game after each step."""
        while not self.is_compact():
            self.float_one_step()
            yield self

    def float_until_compact(self) -> int:
        """Floats to a fixed point; returns the number of steps taken."""
        return sum(1 for _ in self.float_frames())

    def can_pop(self) -> bool:
        return rules.can_pop(self.current)

    def rows_as_strings(self) -> List[str]:
        return self.current.rows_as_strings()
