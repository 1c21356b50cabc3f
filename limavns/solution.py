"""Clustering solution with incremental distance sums."""

from __future__ import annotations

from .distances import DistanceMatrix


class Solution:
    """An assignment of points to clusters with its objective value.

    ``sc[i][c]`` holds the sum of squared distances from point ``i`` to every
    point currently assigned to cluster ``c``.
    """

    def __init__(self, n_clusters: int, n_points: int, distances: DistanceMatrix) -> None:
        self.n_clusters = n_clusters
        self.n_points = n_points
        self.distances = distances
        self.value = 0.0
        self.time = 0.0
        self.assignment: list[int] = [0] * n_points
        self.cluster_sizes: list[float] = [0.0] * n_clusters
        self.sc: list[list[float]] = [[0.0] * n_clusters for _ in range(n_points)]

    def copy_from(self, other: Solution) -> None:
        """Overwrite this solution with the state of ``other``."""
        self.distances = other.distances
        self.n_clusters = other.n_clusters
        self.n_points = other.n_points
        self.time = other.time
        self.value = other.value
        self.assignment = list(other.assignment)
        self.cluster_sizes = list(other.cluster_sizes)
        self.sc = [list(row) for row in other.sc]

    def copy(self) -> Solution:
        """Return an independent copy of this solution."""
        duplicate = Solution(self.n_clusters, self.n_points, self.distances)
        duplicate.copy_from(self)
        return duplicate

    def initialize_sc(self) -> None:
        """Recompute the point-to-cluster distance sums from the assignment."""
        sc = [[0.0] * self.n_clusters for _ in range(self.n_points)]
        for i, row in enumerate(sc):
            for j, cluster in enumerate(self.assignment):
                row[cluster] += self.distances.get(i, j)
        self.sc = sc