"""Points in real space and the distances defined between them."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum


class DistanceType(Enum):
    """Metric used to compare two points."""

    EUCLIDEAN = "euclidean"
    FRECHET = "frechet"


def _fmt(value: float) -> str:
    return format(value, "g")


@dataclass(eq=False)
class Point:
    """A labelled vector, also read as a curve of (index, value) vertices.

    Points compare and hash by identity so that they can key dictionaries.
    """

    pos: list[float]
    ident: str = "None"
    lsh_id: list[int] = field(default_factory=list)
    sil_a: float = -1.0
    sil_b: float = -1.0

    def __post_init__(self) -> None:
        self.pos = [float(x) for x in self.pos]

    @property
    def d(self) -> int:
        """Number of coordinates."""
        return len(self.pos)

    def to_str(self) -> str:
        """Coordinates separated by spaces, each followed by one, then a newline."""
        return "".join(f"{_fmt(x)} " for x in self.pos) + "\n"

    def distance(self, other: Point, kind: DistanceType = DistanceType.EUCLIDEAN) -> float:
        """Distance to ``other`` under the given metric."""
        if kind is DistanceType.FRECHET:
            return discrete_frechet(self, other)
        return euclidean(self, other)


def euclidean(a: Point, b: Point) -> float:
    """Euclidean distance; both points must have the same dimension."""
    if a.d != b.d:
        raise ValueError("Distance between points of different dimensions")
    return math.sqrt(sum((x - y) ** 2 for x, y in zip(a.pos, b.pos)))


def discrete_frechet(a: Point, b: Point) -> float:
    """Discrete Fréchet distance between the curves that two points describe.

    Vertex ``i`` of a curve pairs its position ``i + 1`` with its coordinate.
    """
    if not a.pos or not b.pos:
        raise ValueError("Discrete Frechet distance needs non-empty curves")

    previous: list[float] = []
    for i, a_y in enumerate(a.pos):
        dx = (i + 1) - a_y
        row: list[float] = []
        for j, b_y in enumerate(b.pos):
            dy = (j + 1) - b_y
            cost = math.sqrt(dx * dx + dy * dy)
            if not previous and not row:
                best = cost
            elif not previous:
                best = max(row[-1], cost)
            elif not row:
                best = max(previous[0], cost)
            else:
                best = max(min(previous[j], row[-1], previous[j - 1]), cost)
            row.append(best)
        previous = row
    return previous[-1]