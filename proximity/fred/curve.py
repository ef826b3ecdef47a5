"""Polygonal curves with an adjustable view onto a sub-curve."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from proximity.fred.point import Point, Points


class Curve:
    """A sequence of points of one dimension, read through a window.

    Indexing, length and iteration see only the vertices between the
    window's start and end, which ``set_subcurve`` moves and
    ``reset_subcurve`` widens to the whole curve again.
    """

    def __init__(
        self,
        points: Iterable[Point] = (),
        name: str = "unnamed curve",
        dimensions: int | None = None,
    ) -> None:
        self._points: list[Point] = [p.copy() for p in points]
        if dimensions is None:
            dimensions = self._points[0].dimensions if self._points else 0
        self._dimensions = dimensions
        for point in self._points:
            self._check(point)
        self._start = 0
        self._end = len(self._points) - 1
        self.name = name

    @classmethod
    def zeros(cls, complexity: int, dimensions: int, name: str = "unnamed curve") -> Curve:
        """A curve of ``complexity`` vertices, all at the origin."""
        return cls((Point.zeros(dimensions) for _ in range(complexity)), name, dimensions)

    def _check(self, point: Point) -> None:
        if point.dimensions != self._dimensions:
            raise ValueError(
                f"Wrong number of dimensions; expected {self._dimensions} "
                f"dimensions and got {point.dimensions} dimensions."
            )

    @property
    def complexity(self) -> int:
        """Number of vertices in the current window."""
        return 0 if not self._points else self._end - self._start + 1

    @property
    def dimensions(self) -> int:
        return 0 if not self._points else self._dimensions

    def __len__(self) -> int:
        return self.complexity

    def _offset(self, index: int) -> int:
        size = self.complexity
        if index < 0:
            index += size
        if not 0 <= index < size:
            raise IndexError("curve index out of range")
        return self._start + index

    def __getitem__(self, index: int) -> Point:
        return self._points[self._offset(index)]

    def __setitem__(self, index: int, point: Point) -> None:
        if self._points:
            self._check(point)
        self._points[self._offset(index)] = point

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points[self._start : self._end + 1])

    @property
    def front(self) -> Point:
        """First vertex of the window."""
        return self._points[self._start]

    @property
    def back(self) -> Point:
        """Last vertex of the window."""
        return self._points[self._end]

    def set_subcurve(self, start: int, end: int) -> None:
        """Restrict the window to vertices ``start`` to ``end`` of the whole curve."""
        if not 0 <= start <= end < len(self._points):
            raise IndexError(f"Invalid sub-curve [{start}, {end}]")
        self._start = start
        self._end = end

    def reset_subcurve(self) -> None:
        """Widen the window to the whole curve."""
        self._start = 0
        self._end = len(self._points) - 1

    def append(self, point: Point) -> None:
        """Add a vertex at the end; the window then ends at it."""
        if self._points:
            self._check(point)
        else:
            self._dimensions = point.dimensions
        self._points.append(point.copy())
        self._end = len(self._points) - 1

    def centroid(self) -> Point:
        """Mean of all vertices of the whole curve."""
        return Points(self._dimensions, self._points).centroid()

    def copy(self) -> Curve:
        """An independent curve with the same vertices, window and name."""
        result = Curve(self._points, self.name, self._dimensions)
        result._start, result._end = self._start, self._end
        return result

    def __str__(self) -> str:
        body = "[" + ", ".join(str(p) for p in self) + "]" if self._points else ""
        return f"{self.name}\n{body}"

    def __repr__(self) -> str:
        return (
            f"Curve '{self.name}' of complexity {self.complexity} "
            f"and {self.dimensions} dimensions"
        )