"""Points and point sequences in d-dimensional real space for curve algorithms."""

from __future__ import annotations

import math
import sys
from collections.abc import Iterable, Iterator

from proximity.fred.interval import Interval

_EPSILON = sys.float_info.epsilon


def near_eq(x: float, y: float) -> bool:
    """True when ``x`` and ``y`` differ by at most their relative machine epsilon."""
    return abs(x - y) <= min(abs(x), abs(y)) * _EPSILON


def _fmt(value: float) -> str:
    return format(value, "g")


class Point:
    """A mutable vector of coordinates with vector arithmetic.

    ``p * q`` is the dot product of two points; ``p * s`` scales by a number.
    """

    __slots__ = ("_coords",)

    def __init__(self, coords: Iterable[float] = ()) -> None:
        self._coords = [float(c) for c in coords]

    @classmethod
    def zeros(cls, dimensions: int) -> Point:
        """The origin of the given dimension."""
        return cls([0.0] * dimensions)

    @property
    def dimensions(self) -> int:
        return len(self._coords)

    def __len__(self) -> int:
        return len(self._coords)

    def __iter__(self) -> Iterator[float]:
        return iter(self._coords)

    def __getitem__(self, index: int) -> float:
        return self._coords[index]

    def __setitem__(self, index: int, value: float) -> None:
        self._coords[index] = float(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self._coords == other._coords

    __hash__ = None  # type: ignore[assignment]

    def copy(self) -> Point:
        return Point(self._coords)

    def _check(self, other: Point) -> None:
        if other.dimensions != self.dimensions:
            raise ValueError(
                f"Wrong number of dimensions; expected {self.dimensions} "
                f"dimensions and got {other.dimensions} dimensions."
            )

    def __add__(self, other: Point) -> Point:
        self._check(other)
        return Point(a + b for a, b in zip(self._coords, other._coords))

    def __sub__(self, other: Point) -> Point:
        self._check(other)
        return Point(a - b for a, b in zip(self._coords, other._coords))

    def __iadd__(self, other: Point) -> Point:
        self._check(other)
        self._coords = [a + b for a, b in zip(self._coords, other._coords)]
        return self

    def __isub__(self, other: Point) -> Point:
        self._check(other)
        self._coords = [a - b for a, b in zip(self._coords, other._coords)]
        return self

    def __mul__(self, other):
        if isinstance(other, Point):
            self._check(other)
            return sum(a * b for a, b in zip(self._coords, other._coords))
        if isinstance(other, (int, float)):
            return Point(a * other for a in self._coords)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, (int, float)):
            return Point(a * other for a in self._coords)
        return NotImplemented

    def __truediv__(self, divisor: float) -> Point:
        return Point(a / divisor for a in self._coords)

    def __itruediv__(self, divisor: float) -> Point:
        self._coords = [a / divisor for a in self._coords]
        return self

    def dist_sqr(self, other: Point) -> float:
        """Squared Euclidean distance to ``other``."""
        self._check(other)
        return sum((a - b) ** 2 for a, b in zip(self._coords, other._coords))

    def dist(self, other: Point) -> float:
        return math.sqrt(self.dist_sqr(other))

    def length_sqr(self) -> float:
        return sum(a * a for a in self._coords)

    def length(self) -> float:
        return math.sqrt(self.length_sqr())

    def line_segment_dist_sqr(self, p1: Point, p2: Point) -> float:
        """Squared distance to the segment from ``p1`` to ``p2``.

        A segment of zero length is treated as the single point ``p1``.
        """
        u = p2 - p1
        u_sqr = u * u
        if u_sqr == 0:
            return self.dist_sqr(p1)
        param = min(max(((self - p1) * u) / u_sqr, 0.0), 1.0)
        projection = p1 + u * param
        return projection.dist_sqr(self)

    def line_segment_dist(self, p1: Point, p2: Point) -> float:
        return math.sqrt(self.line_segment_dist_sqr(p1, p2))

    def ball_intersection_interval(
        self, distance_sqr: float, line_start: Point, line_end: Point
    ) -> Interval:
        """Parameters in [0, 1] of the segment lying within the ball around this point.

        ``distance_sqr`` is the squared radius. Returns an empty interval when
        the segment misses the ball.
        """
        u = line_end - line_start
        v = self - line_start
        ulen_sqr = u.length_sqr()
        vlen_sqr = v.length_sqr()

        if near_eq(ulen_sqr, 0.0):
            return Interval(0.0, 1.0) if vlen_sqr <= distance_sqr else Interval()

        p = -2.0 * ((u * v) / ulen_sqr)
        q = vlen_sqr / ulen_sqr - distance_sqr / ulen_sqr
        discriminant = p * p / 4.0 - q
        if discriminant < 0:
            return Interval()

        root = math.sqrt(discriminant)
        minus_p_half = -p / 2.0
        r1, r2 = minus_p_half + root, minus_p_half - root
        return Interval(max(0.0, min(r1, r2)), min(1.0, max(r1, r2)))

    def __str__(self) -> str:
        if not self._coords:
            return ""
        return "(" + ",".join(_fmt(c) for c in self._coords) + ")"

    def __repr__(self) -> str:
        return f"Point({self._coords!r})"


class Points(list):
    """A list of points that all share one dimension."""

    def __init__(self, dimensions: int, points: Iterable[Point] = ()) -> None:
        super().__init__()
        self.dimensions = dimensions
        for point in points:
            self.add(point)

    @property
    def number(self) -> int:
        return len(self)

    def add(self, point: Point) -> None:
        """Append ``point``; it must have this collection's dimension."""
        if point.dimensions != self.dimensions:
            raise ValueError(
                f"Wrong number of dimensions; expected {self.dimensions} "
                f"dimensions and got {point.dimensions} dimensions."
            )
        self.append(point)

    def centroid(self) -> Point:
        """Mean of the points; a zero-dimensional point if there are none."""
        if not self:
            return Point.zeros(0)
        mean = self[0].copy()
        for point in self[1:]:
            mean += point
        mean /= len(self)
        return mean

    def __str__(self) -> str:
        if not self:
            return ""
        return "{" + ",".join(str(p) for p in self) + "}"

    def __repr__(self) -> str:
        return f"{len(self)} Points of {self.dimensions} dimensions"