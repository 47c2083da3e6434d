from __future__ import annotations

from typing import List, Set

from .board import COLORS, NONE, Coord, Snapshot


def neighbors(snapshot: Snapshot, coord: Coord) -> List[Coord]:
    """Gets the in-bounds orthogonal neighbors of a coordinate (up, left, right, down)."""
    r, c = coord
    candidates = [(r - 1, c), (r, c - 1), (r, c + 1), (r + 1, c)]
    return [(nr, nc) for nr, nc in candidates if snapshot.in_bounds(nr, nc)]


def cluster_at(snapshot: Snapshot, r: int, c: int) -> Set[Coord]:
    """Coordinates of the same-colour cluster containing (r, c); empty for NONE or out of range."""
    balloon = snapshot.get(r, c)
    if balloon not in COLORS:
        return set()
    seen: Set[Coord] = {(r, c)}
    stack: List[Coord] = [(r, c)]
    while stack:
        current = stack.pop()
        for nxt in neighbors(snapshot, current):
            if nxt in seen or snapshot.get(*nxt) != balloon:
                continue
            seen.add(nxt)
            stack.append(nxt)
    return seen


def is_compact(snapshot: Snapshot) -> bool:
    """True when no balloon has an empty cell directly above it."""
    for i in range(1, snapshot.rows):
        for j in range(snapshot.cols):
            if snapshot.get(i, j) != NONE and snapshot.get(i - 1, j) == NONE:
                return False
    return True


def float_one_step(snapshot: Snapshot) -> None:
    """
    Moves every balloon that has an empty cell above it up by one row, in place.
    Rows are scanned top to bottom, so a balloon moved into row i-1 is not
    moved again in the same pass: one call is one animation frame.
    """
    for i in range(1, snapshot.rows):
        for j in range(snapshot.cols):
            balloon = snapshot.get(i, j)
            if balloon != NONE and snapshot.get(i - 1, j) == NONE:
                snapshot.set(i - 1, j, balloon)
                snapshot.set(i, j, NONE)


def can_pop(snapshot: Snapshot) -> bool:
    """True if any two orthogonally adjacent cells hold the same balloon."""
    for i in range(snapshot.rows):
        for j in range(snapshot.cols):
            balloon = snapshot.get(i, j)
            if balloon == NONE:
                continue
            if j + 1 < snapshot.cols and snapshot.get(i, j + 1) == balloon:
                return True
            if i + 1 < snapshot.rows and snapshot.get(i + 1, j) == balloon:
                return True
    return False
