"""Continuous and discrete Fréchet distances between polygonal curves."""

from __future__ import annotations

import logging
import math
import sys
import time
from dataclasses import dataclass

from proximity.fred.curve import Curve

log = logging.getLogger(__name__)

DEFAULT_ERROR = 1.0
"""Relative error, in percent, allowed by the continuous distance search."""

_EPSILON = sys.float_info.epsilon
_INF = math.inf


def _fmt(value: float) -> str:
    return format(value, "g")


@dataclass
class ContinuousDistance:
    """Result of a continuous Fréchet distance computation."""

    value: float
    time_searches: float = 0.0
    time_bounds: float = 0.0
    number_searches: int = 0

    def __str__(self) -> str:
        return _fmt(self.value)


@dataclass
class DiscreteDistance:
    """Result of a discrete Fréchet distance computation."""

    value: float
    time: float = 0.0

    def __str__(self) -> str:
        return _fmt(self.value)


def continuous_distance(
    curve1: Curve, curve2: Curve, error: float = DEFAULT_ERROR
) -> ContinuousDistance:
    """Continuous Fréchet distance, found by binary search between two bounds.

    The search stops once the bounds are within ``error`` percent of the
    lower bound; the lower bound is returned.
    """
    if curve1.complexity < 2 or curve2.complexity < 2:
        raise ValueError("comparison possible only for curves of at least two points")
    if curve1.dimensions != curve2.dimensions:
        raise ValueError("comparison possible only for curves of equal number of dimensions")

    start = time.process_time()
    log.debug("CFD: computing lower bound")
    lb = projective_lower_bound(curve1, curve2)
    log.debug("CFD: computing upper bound")
    ub = greedy_upper_bound(curve1, curve2)
    bounds_time = time.process_time() - start

    result = _search(curve1, curve2, ub, lb, error)
    result.time_bounds = bounds_time
    return result


def _search(
    curve1: Curve, curve2: Curve, ub: float, lb: float, error: float
) -> ContinuousDistance:
    start = time.process_time()
    p_error = max(lb * error / 100, _EPSILON)
    searches = 0

    if ub - lb > p_error:
        if math.isnan(lb) or math.isnan(ub):
            return ContinuousDistance(math.nan)
        log.debug("CFD: binary search using FSD")
        while ub - lb > p_error:
            searches += 1
            split = (ub + lb) / 2
            if split in (lb, ub):
                break
            if less_than_or_equal(split, curve1, curve2):
                ub = split
            else:
                lb = split
            log.debug("CFD: narrowed distance to [%s, %s]", lb, ub)

    return ContinuousDistance(
        value=lb,
        time_searches=time.process_time() - start,
        number_searches=searches,
    )


def less_than_or_equal(distance: float, curve1: Curve, curve2: Curve) -> bool:
    """Decide from the free-space diagram whether the distance is at most ``distance``."""
    dist_sqr = distance * distance
    n1 = curve1.complexity
    n2 = curve2.complexity

    # reachable1[i][j]: earliest reachable parameter on segment i of curve1 at vertex j of curve2
    reachable1 = [[_INF] * n2 for _ in range(n1 - 1)]
    # reachable2[i][j]: earliest reachable parameter on segment j of curve2 at vertex i of curve1
    reachable2 = [[_INF] * (n2 - 1) for _ in range(n1)]

    for i in range(n1 - 1):
        reachable1[i][0] = 0.0
        if curve2[0].dist_sqr(curve1[i + 1]) > dist_sqr:
            break
    for j in range(n2 - 1):
        reachable2[0][j] = 0.0
        if curve1[0].dist_sqr(curve2[j + 1]) > dist_sqr:
            break

    for i in range(n1):
        for j in range(n2):
            if i < n1 - 1 and j > 0:
                free = curve2[j].ball_intersection_interval(dist_sqr, curve1[i], curve1[i + 1])
                if not free.is_empty():
                    if reachable2[i][j - 1] != _INF:
                        reachable1[i][j] = free.begin
                    elif reachable1[i][j - 1] <= free.end:
                        reachable1[i][j] = max(free.begin, reachable1[i][j - 1])
            if j < n2 - 1 and i > 0:
                free = curve1[i].ball_intersection_interval(dist_sqr, curve2[j], curve2[j + 1])
                if not free.is_empty():
                    if reachable1[i - 1][j] != _INF:
                        reachable2[i][j] = free.begin
                    elif reachable2[i - 1][j] <= free.end:
                        reachable2[i][j] = max(free.begin, reachable2[i - 1][j])

    return reachable1[-1][-1] < _INF


def greedy_upper_bound(curve1: Curve, curve2: Curve) -> float:
    """Width of a greedily built vertex traversal, an upper bound on the distance."""
    result = 0.0
    len1, len2 = curve1.complexity, curve2.complexity
    i = j = 0

    while i < len1 - 1 and j < len2 - 1:
        result = max(result, curve1[i].dist_sqr(curve2[j]))
        dist1 = curve1[i + 1].dist_sqr(curve2[j])
        dist2 = curve1[i].dist_sqr(curve2[j + 1])
        dist3 = curve1[i + 1].dist_sqr(curve2[j + 1])
        if dist1 <= dist2 and dist1 <= dist3:
            i += 1
        elif dist2 <= dist1 and dist2 <= dist3:
            j += 1
        else:
            i += 1
            j += 1

    while i < len1:
        result = max(result, curve1[i].dist_sqr(curve2[j]))
        i += 1
    i -= 1
    while j < len2:
        result = max(result, curve1[i].dist_sqr(curve2[j]))
        j += 1

    return math.sqrt(result)


def _vertex_to_curve_sqr(point, curve: Curve) -> float:
    best = _INF
    for j in range(curve.complexity - 1):
        a, b = curve[j], curve[j + 1]
        if a.dist_sqr(b) > 0:
            d = point.line_segment_dist_sqr(a, b)
        else:
            d = point.dist_sqr(a)
        best = min(best, d)
    return best


def projective_lower_bound(curve1: Curve, curve2: Curve) -> float:
    """Largest distance from a vertex of one curve to the other curve, or between endpoints."""
    candidates = [_vertex_to_curve_sqr(p, curve2) for p in curve1]
    candidates += [_vertex_to_curve_sqr(p, curve1) for p in curve2]
    candidates.append(curve1[0].dist_sqr(curve2[0]))
    candidates.append(curve1[-1].dist_sqr(curve2[-1]))
    return math.sqrt(max(candidates))


def discrete_distance(curve1: Curve, curve2: Curve) -> DiscreteDistance:
    """Discrete Fréchet distance by dynamic programming over vertex pairs."""
    if curve1.complexity == 0 or curve2.complexity == 0:
        raise ValueError("comparison possible only for non-empty curves")
    start = time.process_time()

    previous: list[float] = []
    for p in curve1:
        row: list[float] = []
        for j, q in enumerate(curve2):
            cost = p.dist_sqr(q)
            if not previous and not row:
                best = cost
            elif not previous:
                best = max(row[-1], cost)
            elif not row:
                best = max(previous[0], cost)
            else:
                best = max(min(previous[j], previous[j - 1], row[-1]), cost)
            row.append(best)
        previous = row

    return DiscreteDistance(
        value=math.sqrt(previous[-1]), time=time.process_time() - start
    )