"""Swap-based local search for balanced clustering."""

from __future__ import annotations

import itertools
import logging
from collections.abc import Iterator, Sequence

from .chrono import Chrono
from .distances import Pair
from .point import Point
from .rng import Random
from .solution import Solution

logger = logging.getLogger(__name__)

_TOLERANCE = 0.0001


def _rotated_pairs(size: int, start: int) -> Iterator[tuple[int, int]]:
    for a in range(start, size + start - 1):
        for b in range(a + 1, size + start):
            yield a % size, b % size


class LocalSearch:
    """Improves a solution by swapping points between clusters, keeping sizes fixed."""

    def __init__(
        self,
        points: Sequence[Point],
        rng: Random,
        ranked_entities: Sequence[Sequence[Pair]],
    ) -> None:
        self.points = points
        self.rng = rng
        self.ranked_entities = ranked_entities

    def execute(self, solution: Solution, timer: Chrono, max_time: float) -> None:
        """Apply improving swaps until none is found or time runs out."""
        while self.swap_first_random(solution, timer, max_time):
            pass

    @staticmethod
    def _delta(solution: Solution, i: int, cluster_i: int, j: int, cluster_j: int) -> float:
        sc = solution.sc
        sizes = solution.cluster_sizes
        d = solution.distances.get(i, j)
        return (sc[i][cluster_j] - sc[j][cluster_j] - d) / sizes[cluster_j] + (
            sc[j][cluster_i] - sc[i][cluster_i] - d
        ) / sizes[cluster_i]

    def swap_best(self, solution: Solution, timer: Chrono, max_time: float) -> bool:
        """Apply the best improving swap, if any; return whether one was applied."""
        best: tuple[int, int, int, int] | None = None
        best_delta = 0.0
        best_time = 0.0
        for i, j in itertools.combinations(range(len(self.points)), 2):
            cluster_i = solution.assignment[i]
            cluster_j = solution.assignment[j]
            if cluster_i == cluster_j:
                continue
            delta = self._delta(solution, i, cluster_i, j, cluster_j)
            now = timer.elapsed()
            if now > max_time:
                break
            if delta < best_delta:
                best = (cluster_i, i, cluster_j, j)
                best_delta = delta
                best_time = now
        if best is None:
            return False
        self.swap(solution, *best, best_delta)
        solution.time = best_time
        return True

    def swap_first_random(self, solution: Solution, timer: Chrono, max_time: float) -> bool:
        """Apply the first improving swap, scanning from a random start point."""
        size = len(self.points)
        if size == 0:
            return False
        start = self.rng.rand_int(0, size - 1)
        for i, j in _rotated_pairs(size, start):
            cluster_i = solution.assignment[i]
            cluster_j = solution.assignment[j]
            if cluster_i == cluster_j:
                continue
            delta = self._delta(solution, i, cluster_i, j, cluster_j)
            now = timer.elapsed()
            if now > max_time:
                return False
            if delta < 0.0:
                self.swap(solution, cluster_i, i, cluster_j, j, delta)
                solution.time = now
                return True
        return False

    def swap(
        self, solution: Solution, cluster_i: int, i: int, cluster_j: int, j: int, delta: float
    ) -> None:
        """Exchange the clusters of points ``i`` and ``j`` and update the sums."""
        solution.assignment[i] = cluster_j
        solution.assignment[j] = cluster_i
        solution.value += delta
        distances = solution.distances
        for k, row in enumerate(solution.sc):
            d_ki = distances.get(k, i)
            d_kj = distances.get(k, j)
            row[cluster_i] += d_kj - d_ki
            row[cluster_j] += d_ki - d_kj

    def _recompute(self, solution: Solution) -> tuple[float, list[int]]:
        dimensions = self.points[0].dimensions
        centroids = [[0.0] * dimensions for _ in range(solution.n_clusters)]
        for point, cluster in zip(self.points, solution.assignment):
            size = solution.cluster_sizes[cluster]
            centroid = centroids[cluster]
            for d, coordinate in enumerate(point):
                centroid[d] += coordinate / size
        counts = [0] * solution.n_clusters
        total = 0.0
        for point, cluster in zip(self.points, solution.assignment):
            total += point.squared_distance(centroids[cluster])
            counts[cluster] += 1
        return total, counts

    def check_solution(self, before: Solution, after: Solution, delta: float) -> bool:
        """Verify stored values, the delta and cluster sizes against a full recomputation."""
        value_before, counts_before = self._recompute(before)
        value_after, counts_after = self._recompute(after)

        diff = abs(before.value - value_before)
        if diff >= _TOLERANCE:
            logger.warning(
                "value of the previous solution diverges by %.8e (stored %.8e, computed %.8e)",
                diff, before.value, value_before,
            )
            return False

        diff = abs(after.value - value_after)
        if diff >= _TOLERANCE:
            logger.warning(
                "value of the new solution diverges by %.8e (stored %.8e, computed %.8e)",
                diff, after.value, value_after,
            )
            return False

        computed_delta = abs(value_before - value_after)
        diff = abs(computed_delta - abs(delta))
        if diff >= _TOLERANCE:
            logger.warning(
                "delta diverges by %.8e (given %.8e, computed %.8e)",
                diff, delta, computed_delta,
            )
            return False

        for label, solution, counts in (
            ("previous", before, counts_before),
            ("new", after, counts_after),
        ):
            for cluster, (size, count) in enumerate(zip(solution.cluster_sizes, counts)):
                if size != count:
                    logger.warning("cluster %d size diverges in the %s solution", cluster, label)
                    return False
        return True