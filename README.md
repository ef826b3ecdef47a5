# proximity

Building blocks for working with fixed-length vectors and polygonal
curves: points and their distances, clusters with k-means++ seeding,
readers for point and configuration files, text reports of search and
clustering results, and continuous and discrete Fréchet distances with
curve simplification.

## Installation

```
pip install .
```

Running the tests:

```
pip install ".[test]"
pytest
```

## Points and distances

`proximity.point` defines `Point`, a labelled vector (`pos`, `ident`),
and `DistanceType` with the members `EUCLIDEAN` and `FRECHET`.

- `Point.distance(other, kind)` uses `euclidean` or `discrete_frechet`.
- `euclidean(a, b)` raises `ValueError` for points of different dimension.
- `discrete_frechet(a, b)` reads each point as a curve whose vertex `i`
  is `(i + 1, pos[i])` and returns the discrete Fréchet distance between
  the two curves.
- `Point.to_str()` gives the coordinates, each followed by a space, then
  a newline.

Points compare and hash by identity, so they can key dictionaries.

```python
from proximity.point import DistanceType, Point

a = Point([1, 2, 3], "a")
b = Point([4, 5, 6], "b")
a.distance(b)                          # 5.196...
Point([1, 2]).distance(Point([4, 5]), DistanceType.FRECHET)  # 3.0
```

## Input files

`proximity.parser.parse_input_file(path)` reads one point per line: an
identifier, then the coordinates, all separated by tabs, with a tab after
the last coordinate (text after the last tab is ignored):

```
item_1	12	7	30	
item_2	9	8	27	
```

The first line sets the dimension. Lines with a different number of
coordinates are logged as warnings and skipped.

`proximity.parser.parse_config(path)` reads `name: value` lines into a
`proximity.cluster.ClusterConfig`:

```
number_of_clusters: 10
number_of_vector_hash_tables: 3
number_of_vector_hash_functions: 4
max_number_M_hypercube: 10
number_of_hypercube_dimensions: 3
number_of_probes: 2
```

Fields that are not set stay at `-1`. Lines without a colon, values that
are not integers and unknown names are logged and ignored.

## Clusters and k-means++ seeding

`proximity.cluster.Cluster` holds a `centroid` and a list of `points`.
`add_point` appends a point; `update()` moves the centroid to the mean
of the assigned points and returns how far it moved. It raises
`ValueError` when the cluster has no points.

`proximity.kmeans.initialize_clusters(points, k)` picks `k` distinct
input points as centroids: the first uniformly at random, each further
one with probability proportional to the squared distance to its nearest
centroid so far. It raises `ValueError` when there are no points or `k`
is outside `1..len(points)`.

## Reports

`proximity.output` formats results as text:

- `format_search_report(results, true_results, queries, algorithm,
  average_duration, brute_average_duration, kind)` lists, per query, the
  approximate and the true nearest neighbour with their distances, then
  the two average times in milliseconds and the maximum approximation
  factor (MAF).
- `format_cluster_report(assignment_method, clusters, duration_ms,
  silhouette, silhouettes_enabled, complete)` lists each cluster's size
  and centroid and the clustering time; optionally the given silhouette
  values and each cluster's members.

`search_output` and `cluster_output` take the same arguments plus an
`outputfile`; they write the report there, or to standard output when no
file is given or it cannot be opened.

## Argument parsing

`proximity.options` turns argument lists (without the program name) into
settings:

- `parse_search_args(argv)` returns `SearchOptions`. Options: `-i` input
  file, `-q` query file, `-a` algorithm (`LSH`, `Hypercube` or
  `Frechet`), `-k` (default 4), `-L` number of tables (default 5), `-M`
  (default 10), `-p` probes (default 2), `-m` metric (`discrete` or
  `continuous`), `-d` delta (default 0.69), `-o` output file.
- `parse_cluster_args(argv)` returns `ClusterOptions`. Options: `-i`
  input file and `-c` configuration file (both required), `-a`
  assignment method (`Classic`, `LSH` or `Hypercube`, default
  `Classic`), `-u` update method (`Mean Vector` or `Mean Frechet`,
  default `Mean Vector`), `-s` silhouettes, `-C` complete listing, `-o`
  output file. `Hypercube` together with `Mean Frechet` is refused.

Bad or missing options raise `ValueError`.

## Curves: `proximity.fred`

- `proximity.fred.interval.Interval`: a parameter interval with
  `is_empty`, `intersects` and `reset`.
- `proximity.fred.point.Point` and `Points`: coordinate vectors with
  vector arithmetic (`p * q` is the dot product), `dist`, `dist_sqr`,
  `line_segment_dist`, `ball_intersection_interval`, and the mean of a
  collection via `Points.centroid()`. `near_eq(x, y)` compares floats
  within relative machine epsilon.
- `proximity.fred.curve.Curve`: a sequence of points seen through a
  window that `set_subcurve(start, end)` narrows and `reset_subcurve()`
  widens again; `append` adds a vertex.
- `proximity.fred.frechet`: `continuous_distance(curve1, curve2, error)`
  binary-searches between `projective_lower_bound` and
  `greedy_upper_bound` using the free-space test `less_than_or_equal`,
  stopping within `error` percent (default `DEFAULT_ERROR`, 1);
  `discrete_distance(curve1, curve2)` uses dynamic programming. Both
  return result objects with a `value` and timings.
- `proximity.fred.simplification`: `SubcurveShortcutGraph(curve)
  .minimum_error_simplification(ell)` gives the exact simplification of
  at most `ell` vertices; `approximate_minimum_error_simplification(curve,
  ell)` gives exactly `ell` vertices; `approximate_minimum_link_simplification(curve,
  epsilon)` keeps each shortcut within `epsilon`.
- `proximity.fred.curves.Curves`: a list of curves of one dimension with
  `add` and `simplify(ell, approx)`.

```python
from proximity.fred.curve import Curve
from proximity.fred.frechet import continuous_distance, discrete_distance
from proximity.fred.point import Point

c1 = Curve([Point([0, 0]), Point([1, 0]), Point([2, 0])])
c2 = Curve([Point([0, 1]), Point([2, 1])])
discrete_distance(c1, c2).value
continuous_distance(c1, c2).value
```

## What the package does not do

- It has no nearest-neighbour indexes: no LSH tables, no hypercube
  projection and no exhaustive search. `format_search_report` and
  `search_output` format results that the caller has computed.
- It has no assignment step and no clustering loop: points have to be
  assigned to clusters with `Cluster.add_point` by the caller before
  `Cluster.update`.
- It does not compute silhouette scores; `format_cluster_report` prints
  the values it is given.
- It installs no command-line programs. `parse_search_args` and
  `parse_cluster_args` only turn argument lists into settings.