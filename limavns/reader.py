"""Readers for instance files and time tables."""

from __future__ import annotations

import re
from os import PathLike

from .point import Point

_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_ATOF = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)
_SEPARATORS = ",\t\r\n"
_WHITESPACE = " \t\n\v\f\r"

TIMES_ROWS = 16
TIMES_COLUMNS = 10


def read_instance(path: str | PathLike[str]) -> list[Point]:
    """Read one point per line; values are separated by commas or tabs.

    Reading stops at the first token that is not a number.
    """
    with open(path, encoding="utf-8") as handle:
        text = handle.read()

    rows: list[list[float]] = []
    new_row = True
    pos = 0
    length = len(text)
    while True:
        while pos < length and text[pos] in _WHITESPACE:
            pos += 1
        match = _NUMBER.match(text, pos)
        if match is None:
            break
        pos = match.end()
        if new_row:
            rows.append([])
            new_row = False
        rows[-1].append(float(match.group()))
        while pos < length and text[pos] in _SEPARATORS:
            if text[pos] == "\n":
                new_row = True
            pos += 1
    return [Point(row) for row in rows]


def _atof(text: str) -> float:
    match = _ATOF.match(text.lstrip(_WHITESPACE))
    return float(match.group()) if match else 0.0


def read_times_file(path: str | PathLike[str]) -> list[list[float]]:
    """Read a 16 x 10 table of ';'-separated values, one row per line.

    Cells that are missing from the file stay 0.0.
    """
    times = [[0.0] * TIMES_COLUMNS for _ in range(TIMES_ROWS)]
    with open(path, encoding="utf-8") as handle:
        text = handle.read()

    pos = 0

    def field(delimiter: str) -> str | None:
        nonlocal pos
        end = text.find(delimiter, pos)
        if end < 0:
            pos = len(text)
            return None
        value = text[pos:end]
        pos = end + 1
        return value

    for row in times:
        for column in range(TIMES_COLUMNS - 1):
            value = field(";")
            if value is None:
                break
            row[column] = _atof(value)
        value = field("\n")
        if value is None:
            break
        row[TIMES_COLUMNS - 1] = _atof(value)
    return times