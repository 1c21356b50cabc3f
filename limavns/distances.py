"""Pairwise squared distances between points and neighbour rankings."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .point import Point


@dataclass
class Pair:
    """An entity identifier with an associated value; ordered by value only."""

    id: int
    value: float

    def __lt__(self, other: Pair) -> bool:
        return self.value < other.value


class DistanceMatrix:
    """Symmetric matrix of squared Euclidean distances, stored as an upper triangle."""

    def __init__(self, points: Iterable[Point]) -> None:
        pts = list(points)
        self._rows: list[list[float]] = [
            [0.0] + [p.squared_distance(q) for q in pts[i + 1:]]
            for i, p in enumerate(pts)
        ]

    def __len__(self) -> int:
        return len(self._rows)

    def _locate(self, i: int, j: int) -> tuple[int, int]:
        size = len(self._rows)
        if not (0 <= i < size and 0 <= j < size):
            raise IndexError(f"index ({i}, {j}) out of range for {size} points")
        return (i, j - i) if i < j else (j, i - j)

    def get(self, i: int, j: int) -> float:
        """Return the squared distance between points ``i`` and ``j``."""
        row, col = self._locate(i, j)
        return self._rows[row][col]

    def set(self, i: int, j: int, value: float) -> None:
        """Store the squared distance between points ``i`` and ``j``."""
        row, col = self._locate(i, j)
        self._rows[row][col] = value


def rank_entities(matrix: DistanceMatrix) -> list[list[Pair]]:
    """For every point, list the other points sorted by increasing distance."""
    size = len(matrix)
    return [
        sorted(Pair(other, matrix.get(origin, other)) for other in range(size) if other != origin)
        for origin in range(size)
    ]