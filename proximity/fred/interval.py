"""Closed parameter intervals inside [0, 1] on a line segment."""

from __future__ import annotations

import sys
from dataclasses import dataclass

_EPSILON = sys.float_info.epsilon


def _fmt(value: float) -> str:
    return format(value, "g")


@dataclass(order=True)
class Interval:
    """The interval [begin, end]; the default (1, 0) is the empty interval.

    Intervals order by ``begin`` and then by ``end``.
    """

    begin: float = 1.0
    end: float = 0.0

    def is_empty(self) -> bool:
        """True when the interval is shorter than machine epsilon or reversed."""
        if self.end - self.begin >= _EPSILON:
            return self.begin > self.end
        return True

    def intersects(self, other: Interval) -> bool:
        """True when both intervals are non-empty and they overlap."""
        if self.is_empty() or other.is_empty():
            return False
        return (
            self.begin <= other.begin <= self.end
            or self.begin <= other.end <= self.end
            or (other.begin <= self.begin and other.end >= self.end)
        )

    def reset(self) -> None:
        """Make the interval empty again."""
        self.begin = 1.0
        self.end = 0.0

    def __str__(self) -> str:
        return f"({_fmt(self.begin)}, {_fmt(self.end)})"