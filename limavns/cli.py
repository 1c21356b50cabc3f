"""Command line entry point running the search several times on one instance."""

from __future__ import annotations

import math
import re
import sys
from collections.abc import Sequence

from .distances import DistanceMatrix, rank_entities
from .reader import read_instance
from .rng import Random
from .solution import Solution
from .vns import Vns

_INT = re.compile(r"\s*([+-]?\d+)")
_FLOAT = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

_RULE = "=" * 108
_STARS = "*" * 86
_K_MIN = 2
_PROGRAM = "limavns"


def _atoi(text: str) -> int:
    match = _INT.match(text)
    return int(match.group(1)) if match else 0


def _atof(text: str) -> float:
    match = _FLOAT.match(text)
    return float(match.group(1)) if match else 0.0


def _usage(program: str) -> str:
    """Return the message shown when arguments are missing."""
    return (
        "ARGUMENT(S) MISSING!!\n"
        f"Usage: {program} <path/instance.csv> <k=number of clusters> <cpu time limit>"
        " <number of runs> <seed> <path/output file> <path/assignment file>"
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the search and append statistics and the best assignment to CSV files."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 7:
        print(_usage(_PROGRAM))
        return 1

    path_instance = args[0]
    n_clusters = _atoi(args[1])
    max_time = _atof(args[2])
    n_runs = _atoi(args[3])
    seed = _atoi(args[4])
    path_stats = args[5] + ".csv"
    path_assignment = args[6] + ".csv"

    try:
        with open(path_instance, encoding="utf-8"):
            pass
    except OSError:
        print("PROBLEM IN THE PATH OF THE INSTANCE FILE")
        return 1

    try:
        stats_file = open(path_stats, "a", encoding="utf-8")
    except OSError:
        print("PROBLEM IN THE PATH OF THE OUTPUT FILE")
        return 1

    with stats_file:
        try:
            assignment_file = open(path_assignment, "a", encoding="utf-8")
        except OSError:
            print("PROBLEM IN THE PATH OF THE ASSIGNMENT FILE")
            return 1

        with assignment_file:
            points = read_instance(path_instance)
            distances = DistanceMatrix(points)
            best_solution = Solution(n_clusters, len(points), distances)
            ranked = rank_entities(distances)

            k_max = len(points) // 2
            k_step = k_max // 20

            print(_RULE)
            print(f"Instance: {path_instance}")
            print(f"Clusters: {n_clusters}")
            print(f"Kmax: {k_max}")
            print(f"KStep: {k_step}")

            best_value = sys.float_info.max
            best_time = 0.0
            value_sum = 0.0
            time_sum = 0.0

            for run in range(n_runs):
                rng = Random(seed)
                vns = Vns(points, distances, n_clusters, rng, ranked)
                print(f"{'-' * 37} Execution {run + 1} {'-' * 41}")
                print(f"Seed = {seed}")
                print(f"maxTime = {max_time:.4f}")

                solution = Solution(n_clusters, len(points), distances)
                vns.execute(solution, max_time, _K_MIN, k_step, k_max)

                if solution.value < best_value:
                    best_solution.copy_from(solution)
                    best_value = solution.value
                    best_time = solution.time
                time_sum += solution.time
                value_sum += solution.value

                print()
                print(
                    f"Objective Function value: {solution.value:.8e}"
                    f" in {solution.time:.4f} seconds"
                )
                seed += 1

            mean_value = value_sum / n_runs if n_runs > 0 else math.nan
            mean_time = time_sum / n_runs if n_runs > 0 else math.nan

            print()
            print(_STARS)
            print()
            print(
                f"Best Objective Function value found: {best_value:.8e}"
                f" in {best_time:.4f} seconds"
            )
            print(f"Average Objective Function value: {mean_value:.8e}")
            print(f"Average Time value: {mean_time:.4f}s")
            print()

            stats_file.write(
                f"{path_instance},{best_value:.8e},{mean_value:.8e},"
                f"{best_time:.4f},{mean_time:.4f}\n"
            )
            assignment_file.write(
                path_instance
                + "".join(f",{cluster}" for cluster in best_solution.assignment)
                + "\n"
            )
            print(_STARS)
    return 0


if __name__ == "__main__":
    sys.exit(main())