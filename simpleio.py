"""
Line-based console input helpers.

Each reader takes one line from standard input and converts it, prompting
"Retry: " until the text parses. When no line can be read at all (end of
input) a per-type sentinel is returned instead.
"""
from __future__ import annotations

import sys
from typing import Callable, Optional, TypeVar

T = TypeVar("T")

CHAR_MAX = chr(127)
DBL_MAX = sys.float_info.max
FLT_MAX = 3.4028234663852886e+38
INT_MAX = 2 ** 31 - 1
LLONG_MAX = 2 ** 63 - 1

RETRY_PROMPT = "Retry: "


def _read_line(prompt: str) -> Optional[str]:
    try:
        return input(prompt)
    except EOFError:
        return None


def _read_until(parse: Callable[[str], Optional[T]], sentinel: T, prompt: str) -> T:
    text = _read_line(prompt)
    while text is not None:
        value = parse(text.strip())
        if value is not None:
            return value
        text = _read_line(RETRY_PROMPT)
    return sentinel


def _parse_char(text: str) -> Optional[str]:
    return text if len(text) == 1 else None


def _parse_float(text: str) -> Optional[float]:
    if not text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def _int_parser(low: int, high: int) -> Callable[[str], Optional[int]]:
    def parse(text: str) -> Optional[int]:
        try:
            value = int(text, 10)
        except ValueError:
            return None
        return value if low <= value <= high else None
    return parse


def get_char(prompt: str = "") -> str:
    """Reads one non-blank character; CHAR_MAX at end of input."""
    return _read_until(_parse_char, CHAR_MAX, prompt)


def get_double(prompt: str = "") -> float:
    return _read_until(_parse_float, DBL_MAX, prompt)


def get_float(prompt: str = "") -> float:
    # Python has a single float type; FLT_MAX only marks end of input here.
    return _read_until(_parse_float, FLT_MAX, prompt)


def get_int(prompt: str = "") -> int:
    """Reads an int in [-2**31 + 1, 2**31 - 2]; INT_MAX at end of input."""
    return _read_until(_int_parser(-INT_MAX, INT_MAX - 1), INT_MAX, prompt)


def get_long_long(prompt: str = "") -> int:
    """Reads an int in [-2**63 + 1, 2**63 - 2]; LLONG_MAX at end of input."""
    return _read_until(_int_parser(-LLONG_MAX, LLONG_MAX - 1), LLONG_MAX, prompt)


def get_string(prompt: str = "") -> Optional[str]:
    """Reads a line as-is (no stripping); None at end of input."""
    return _read_line(prompt)
