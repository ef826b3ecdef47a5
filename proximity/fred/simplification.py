"""Simplification of polygonal curves under the continuous Fréchet distance."""

from __future__ import annotations

import logging
import math
import sys

from proximity.fred.curve import Curve
from proximity.fred.frechet import DEFAULT_ERROR, continuous_distance, discrete_distance

log = logging.getLogger(__name__)

_EPSILON = sys.float_info.epsilon
_INF = math.inf


def _visible(curve: Curve) -> Curve:
    """An independent curve holding the vertices currently visible in ``curve``."""
    if curve.complexity == 0:
        raise ValueError("Cannot simplify an empty curve")
    return Curve(list(curve), curve.name, curve.dimensions)


def _endpoints(curve: Curve) -> Curve:
    return Curve([curve.front, curve.back], dimensions=curve.dimensions)


def _shortcut_error(work: Curve, start: int, end: int) -> float:
    """Continuous Fréchet distance between vertices start..end and their shortcut."""
    work.set_subcurve(start, end)
    try:
        return continuous_distance(work, _endpoints(work)).value
    finally:
        work.reset_subcurve()


class SubcurveShortcutGraph:
    """Errors of every shortcut between two vertices of a curve.

    ``edges[i][j]`` is the distance between the sub-curve from vertex ``i``
    to vertex ``j`` and the segment joining them; it is infinite for ``j <= i``.
    """

    def __init__(self, curve: Curve) -> None:
        self.curve = _visible(curve)
        n = self.curve.complexity
        self.edges: list[list[float]] = [[_INF] * n for _ in range(n)]
        log.debug("SIMPL: computing shortcut graph")
        for i in range(n - 1):
            for j in range(i + 1, n):
                self.edges[i][j] = _shortcut_error(self.curve, i, j)

    def minimum_error_simplification(self, ell: int) -> Curve:
        """The simplification of at most ``ell`` vertices with least error.

        Curves no longer than ``ell`` are returned whole; for ``ell <= 2``
        the result is the segment between the endpoints.
        """
        curve = self.curve
        n = curve.complexity
        if ell >= n:
            return curve.copy()
        if ell <= 2:
            return _endpoints(curve)

        jumps = ell - 1
        distances = [[_INF] * jumps for _ in range(n)]
        predecessors = [[0] * jumps for _ in range(n)]

        for j in range(1, n):
            distances[j][0] = self.edges[0][j]
        for i in range(1, jumps):
            for j in range(1, n):
                others = [
                    max(distances[k][i - 1], self.edges[k][j]) for k in range(j)
                ]
                best = min(range(j), key=others.__getitem__)
                distances[j][i] = others[best]
                predecessors[j][i] = best

        vertices = [curve.back]
        predecessor = predecessors[n - 1][jumps - 1]
        for level in range(jumps - 2, -2, -1):
            vertices.append(curve[predecessor])
            if level >= 0:
                predecessor = predecessors[predecessor][level]
        vertices.reverse()
        return Curve(vertices, dimensions=curve.dimensions)


def approximate_minimum_link_simplification(curve: Curve, epsilon: float) -> Curve:
    """A simplification with few vertices whose shortcuts each stay within ``epsilon``.

    From each kept vertex the longest admissible shortcut is found by an
    exponential search followed by a binary search.
    """
    if not epsilon >= 0:
        raise ValueError("epsilon must be a non-negative number")
    work = _visible(curve)
    complexity = work.complexity

    simplification = Curve([work.front], dimensions=work.dimensions)
    distance = 0.0
    i = 0
    while i < complexity - 1:
        j = 0
        while distance <= epsilon:
            j += 1
            if i + 2**j >= complexity:
                break
            distance = _shortcut_error(work, i, i + 2**j)

        low = 0 if j <= 1 else 2 ** (j - 1)
        high = min(2**j, complexity - i - 1)
        while low < high:
            mid = math.ceil((low + high) / 2)
            distance = _shortcut_error(work, i, i + mid)
            if distance <= epsilon:
                low = mid
            else:
                high = mid - 1

        log.debug("ASIMPL: shortcutting from %d to %d", i, i + low)
        i += low
        simplification.append(work[i])
    return simplification


def approximate_minimum_error_simplification(curve: Curve, ell: int) -> Curve:
    """A simplification of exactly ``ell`` vertices with approximately least error.

    The error bound is narrowed by binary search over minimum-link
    simplifications; missing vertices repeat the last one.
    """
    work = _visible(curve)
    segment = _endpoints(work)
    if ell <= 2:
        return segment

    min_distance = 0.0
    max_distance = discrete_distance(work, segment).value + 1
    simplification = approximate_minimum_link_simplification(work, max_distance)
    while simplification.complexity > ell:
        max_distance *= 2.0
        simplification = approximate_minimum_link_simplification(work, max_distance)

    epsilon = max(min_distance * DEFAULT_ERROR / 100, _EPSILON)
    while max_distance - min_distance > epsilon:
        mid_distance = (min_distance + max_distance) / 2
        if mid_distance in (min_distance, max_distance):
            break
        candidate = approximate_minimum_link_simplification(work, mid_distance)
        if candidate.complexity > ell:
            min_distance = mid_distance
        else:
            simplification = candidate
            max_distance = mid_distance

    for _ in range(ell - simplification.complexity):
        simplification.append(simplification.back)
    return simplification