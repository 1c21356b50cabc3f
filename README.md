# limavns

A basic variable neighborhood search (VNS) heuristic for **balanced minimum
sum-of-squares clustering**. It partitions `n` points into `k` clusters whose
sizes differ by at most one. The aim is to keep the total squared distance from
each point to its cluster centroid as small as possible.

The search starts from a random balanced assignment: points are shuffled and
then dealt to clusters round-robin. It then alternates two steps. A shaking step
swaps `k` random pairs of points that lie in different clusters. A
first-improvement local search then tries pairwise swaps, scanning from a random
start point. A swap never changes a cluster's size, so every solution stays
balanced. The search stops when a CPU-time limit is reached.

## Installation

```
pip install .
```

The package needs only the standard library. To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
limavns <instance.csv> <k> <cpu-time-limit> <runs> <seed> <output> <assignment>
```

- `instance.csv` holds one point per line, with coordinates separated by commas
  or tabs. Reading stops at the first token that is not a number.
- `k` is the number of clusters.
- `cpu-time-limit` is the CPU-time budget of each run, in seconds.
- `runs` is the number of independent runs. Run `i` (counting from 0) uses
  seed `seed + i`.
- `output` is a base path. One line is appended to `<output>.csv`. It holds the
  instance path, the best objective, the mean objective, the time at which the
  best run's solution was found, and the mean of those times.
- `assignment` is a base path. One line is appended to `<assignment>.csv`. It
  holds the instance path and then the cluster of every point in the best
  solution.

The largest shaking size is `n // 2`. The step is `(n // 2) // 20`, which is 0
for instances with fewer than 40 points. The smallest shaking size is 2.

Progress and a summary are printed to standard output. The exit status is 1 in
these cases, each with a message:

- fewer than seven arguments are given;
- the instance file cannot be opened;
- either output file cannot be opened for appending.

Example:

```
limavns data/iris.csv 3 10 5 1 results/stats results/assign
```

## Library use

```python
from limavns.reader import read_instance
from limavns.distances import DistanceMatrix, rank_entities
from limavns.rng import Random
from limavns.solution import Solution
from limavns.vns import Vns

points = read_instance("data/iris.csv")
distances = DistanceMatrix(points)
ranked = rank_entities(distances)

rng = Random(1)
vns = Vns(points, distances, 3, rng, ranked)
solution = Solution(3, len(points), distances)
kmax = len(points) // 2
iterations = vns.execute(solution, 5.0, 2, max(kmax // 20, 1), kmax)

print(solution.value)       # objective value
print(solution.time)        # CPU seconds at which it was reached
print(solution.assignment)  # cluster index of each point
print(vns.check_solution(solution))  # recomputes the value from centroids
```

The other building blocks are:

- `limavns.rng.Random` is a Park–Miller minimal-standard generator. Its streams
  depend only on the seed. It provides:
  - `randp`
  - `rand_int(low, high)`
  - `rand_size(size)`
  - `rand01`
  - `shuffle(items)`

  `limavns.rng.self_check()` checks the generator against its reference value.
- `limavns.chrono.CpuChrono` measures process CPU time and
  `limavns.chrono.RealChrono` measures wall-clock time. Each has `start`,
  `stop`, `reset` and `elapsed`. `stop` raises `RuntimeError` if the timer is
  not running.
- `limavns.point.Point` is an immutable point. It gives `squared_distance`
  and `distance` to another point or to a coordinate sequence.
- `limavns.distances` provides:
  - `DistanceMatrix`, the symmetric matrix of squared distances;
  - `rank_entities`, which lists, for every point, the other points by
    increasing distance, as `Pair` objects.
- `limavns.solution.Solution` holds an assignment, the cluster sizes and the
  per-point, per-cluster distance sums (`sc`). Its methods are `copy`,
  `copy_from` and `initialize_sc`.
- `limavns.local_search.LocalSearch` provides:
  - `swap_first_random`, a first-improvement swap search, which `execute`
    repeats;
  - `swap_best`, a best-improvement swap search;
  - `check_solution`, a consistency check of a swap.
- `limavns.reader.read_times_file` reads a 16 × 10 table of `;`-separated
  values. Cells that are missing from the file stay 0.0.

## What it does not do

The package does not plot or otherwise visualise clusterings. It does not
choose the number of clusters. It reads instances only in the delimited text
form described above.