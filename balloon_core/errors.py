"""Shared error types for the balloon pop engine."""

from __future__ import annotations


class BalloonError(Exception):
    """Base class for every error raised by :mod:`balloon_core`."""


class InvalidDimensionsError(BalloonError, ValueError):
    """Board rows/cols are not positive or exceed the configured maxima."""

    def __init__(self, rows: int, cols: int, max_rows: int, max_cols: int) -> None:
        super().__init__(
            f"Rows and columns are out of range: {rows}x{cols} "
            f"(allowed 1..{max_rows} x 1..{max_cols})"
        )
        self.rows = rows
        self.cols = cols
        self.max_rows = max_rows
        self.max_cols = max_cols


class InvalidBalloonError(BalloonError, ValueError):
    """A supplied cell value is not a recognised balloon symbol."""

    def __init__(self, r: int, c: int, value: object) -> None:
        super().__init__(f"Invalid balloon {value!r} at ({r}, {c})")
        self.r = r
        self.c = c
        self.value = value


__all__ = [
    "BalloonError",
    "InvalidDimensionsError",
    "InvalidBalloonError",
]
