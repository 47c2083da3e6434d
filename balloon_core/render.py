from __future__ import annotations

from typing import List

from .session import BalloonGame


def _rule(cols: int) -> str:
    return "   +-" + "--" * cols + "+"


def display(game: BalloonGame) -> str:
    """
    Bordered board with row indices on the left and column indices below,
    written vertically (tens digit line, then ones digit line):

       +-----------+
     0 | ^ = o + ^ |
     1 | . = o . + |
       +-----------+
         0 0 0 0 0
         0 1 2 3 4
    """
    lines: List[str] = [_rule(game.cols)]
    for r in range(game.rows):
        cells = "".join(f"{game.get_balloon(r, c)} " for c in range(game.cols))
        lines.append(f"{r:2d} | {cells}| ")
    lines.append(_rule(game.cols))
    lines.append("     " + "".join(f"{c // 10} " for c in range(game.cols)))
    lines.append("     " + "".join(f"{c % 10} " for c in range(game.cols)))
    return "\n".join(lines)


def display_raw(game: BalloonGame) -> str:
    """One character per cell, one row per line, no borders."""
    return "\n".join(game.rows_as_strings())
