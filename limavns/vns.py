"""Basic variable neighbourhood search for balanced minimum sum-of-squares clustering."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .chrono import Chrono, CpuChrono
from .distances import DistanceMatrix, Pair
from .local_search import LocalSearch
from .point import Point
from .rng import Random
from .solution import Solution

logger = logging.getLogger(__name__)

_TOLERANCE = 0.0001
_IMPROVEMENT = 0.01


class Vns:
    """Shakes a solution with random swaps and repairs it with local search until time runs out."""

    def __init__(
        self,
        points: Sequence[Point],
        distances: DistanceMatrix,
        n_clusters: int,
        rng: Random,
        ranked_entities: Sequence[Sequence[Pair]],
    ) -> None:
        self.points = points
        self.distances = distances
        self.n_clusters = n_clusters
        self.rng = rng
        self.ranked_entities = ranked_entities
        self.k = 1
        self.timer: Chrono = CpuChrono()

    def execute(
        self, solution: Solution, max_time: float, k_min: int, k_step: int, k_max: int
    ) -> int:
        """Search until ``max_time`` seconds have elapsed; ``solution`` receives the best found.

        Returns the number of completed neighbourhood cycles plus one.
        """
        iteration = 1
        local_search = LocalSearch(self.points, self.rng, self.ranked_entities)

        self.initial_solution(solution)
        self.timer.reset()
        self.timer.start()
        self.k = k_min

        while self.timer.elapsed() <= max_time:
            partial = solution.copy()
            if self.shaking(partial):
                local_search.execute(partial, self.timer, max_time)

            if partial.value + _IMPROVEMENT < solution.value:
                solution.copy_from(partial)
                self.k = k_min
            else:
                self.k += k_step

            if self.k > k_max:
                self.k = k_min
                iteration += 1
        return iteration

    def initial_solution(self, solution: Solution) -> None:
        """Assign points round-robin in random order, giving balanced cluster sizes."""
        size = len(self.points)
        solution.time = 0.0
        solution.cluster_sizes = [0.0] * solution.n_clusters

        entities = list(range(size))
        self.rng.shuffle(entities)
        for index, entity in enumerate(entities):
            cluster = index % self.n_clusters
            solution.assignment[entity] = cluster
            solution.cluster_sizes[cluster] += 1

        value = 0.0
        assignment = solution.assignment
        for i in range(size - 1):
            cluster = assignment[i]
            for j in range(i + 1, size):
                if assignment[j] == cluster:
                    value += self.distances.get(i, j) / solution.cluster_sizes[cluster]
        solution.value = value
        solution.initialize_sc()

    def shaking(self, solution: Solution) -> bool:
        """Swap ``k`` random pairs of points that lie in different clusters."""
        size = len(self.points)
        if len(set(solution.assignment)) < 2:
            raise ValueError("shaking needs points in at least two different clusters")

        assignment = solution.assignment
        sizes = solution.cluster_sizes
        sc = solution.sc
        distances = self.distances

        for _ in range(self.k):
            point_i = self.rng.rand_int(0, size - 1)
            point_j = self.rng.rand_int(0, size - 1)
            while point_i == point_j or assignment[point_i] == assignment[point_j]:
                point_i = self.rng.rand_int(0, size - 1)
                point_j = self.rng.rand_int(0, size - 1)

            cluster_i = assignment[point_i]
            cluster_j = assignment[point_j]
            assignment[point_i] = cluster_j
            assignment[point_j] = cluster_i

            d = distances.get(point_i, point_j)
            solution.value += (
                sc[point_i][cluster_j] / sizes[cluster_j]
                - sc[point_i][cluster_i] / sizes[cluster_i]
                + sc[point_j][cluster_i] / sizes[cluster_i]
                - sc[point_j][cluster_j] / sizes[cluster_j]
                - d / sizes[cluster_i]
                - d / sizes[cluster_j]
            )
            for k, row in enumerate(sc):
                d_ki = distances.get(k, point_i)
                d_kj = distances.get(k, point_j)
                row[cluster_i] += d_kj - d_ki
                row[cluster_j] += d_ki - d_kj

        solution.time = self.timer.elapsed()
        return True

    def check_solution(self, solution: Solution) -> bool:
        """Verify the stored value and cluster sizes against a full recomputation."""
        dimensions = self.points[0].dimensions
        centroids = [[0.0] * dimensions for _ in range(solution.n_clusters)]
        for point, cluster in zip(self.points, solution.assignment):
            size = solution.cluster_sizes[cluster]
            centroid = centroids[cluster]
            for d, coordinate in enumerate(point):
                centroid[d] += coordinate / size

        counts = [0] * solution.n_clusters
        computed = 0.0
        for point, cluster in zip(self.points, solution.assignment):
            computed += Point(centroids[cluster]).squared_distance(point)
            counts[cluster] += 1

        diff = abs(solution.value - computed)
        if diff >= _TOLERANCE:
            logger.warning(
                "solution value diverges by %.8e (stored %.8e, computed %.8e)",
                diff, solution.value, computed,
            )
            return False

        for cluster, (size, count) in enumerate(zip(solution.cluster_sizes, counts)):
            if size != count:
                logger.warning("cluster %d size diverges", cluster)
                return False
        return True