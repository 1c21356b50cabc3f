"""Points in real coordinate space."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """An immutable point given by its coordinates."""

    coordinates: tuple[float, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "coordinates", tuple(float(c) for c in self.coordinates))

    @property
    def dimensions(self) -> int:
        return len(self.coordinates)

    def __len__(self) -> int:
        return len(self.coordinates)

    def __iter__(self) -> Iterator[float]:
        return iter(self.coordinates)

    def __getitem__(self, index: int) -> float:
        return self.coordinates[index]

    def squared_distance(self, other: Point | Iterable[float]) -> float:
        """Squared Euclidean distance to another point or coordinate sequence."""
        total = 0.0
        for a, b in zip(self.coordinates, other):
            diff = a - b
            total += diff * diff
        return total

    def distance(self, other: Point | Iterable[float]) -> float:
        """Euclidean distance to another point or coordinate sequence."""
        return math.sqrt(self.squared_distance(other))

    def __str__(self) -> str:
        return "".join(f"{c:.6f} " for c in self.coordinates)