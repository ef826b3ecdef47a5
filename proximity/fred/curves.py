"""Collections of curves sharing one dimension."""

from __future__ import annotations

from collections.abc import Iterable

from proximity.fred.curve import Curve
from proximity.fred.simplification import (
    SubcurveShortcutGraph,
    approximate_minimum_error_simplification,
)


def _body(curve: Curve) -> str:
    if curve.complexity == 0:
        return ""
    return "[" + ", ".join(str(p) for p in curve) + "]"


class Curves(list):
    """A list of curves of one dimension.

    ``m`` is the largest complexity among the curves added.
    """

    def __init__(self, dimensions: int = 0, curves: Iterable[Curve] = ()) -> None:
        super().__init__()
        self.dimensions = dimensions
        self.m = 0
        for curve in curves:
            self.add(curve)

    @property
    def number(self) -> int:
        return len(self)

    def add(self, curve: Curve) -> None:
        """Append ``curve``; the first curve fixes the dimension of an empty collection."""
        if curve.dimensions != self.dimensions:
            if self.dimensions != 0:
                raise ValueError(
                    f"Wrong number of dimensions; expected {self.dimensions} "
                    f"dimensions and got {curve.dimensions} dimensions."
                )
            self.dimensions = curve.dimensions
        self.append(curve)
        self.m = max(self.m, curve.complexity)

    def simplify(self, ell: int, approx: bool = False) -> Curves:
        """Simplify every curve to at most ``ell`` vertices.

        Uses the exact shortcut-graph method, or the approximate one when
        ``approx`` is set.
        """
        result = Curves(self.dimensions)
        for curve in self:
            if approx:
                simplified = approximate_minimum_error_simplification(curve, ell)
            else:
                simplified = SubcurveShortcutGraph(curve).minimum_error_simplification(ell)
            simplified.name = f"Simplification of {curve.name}"
            result.add(simplified)
            log_index = len(result)
            del log_index
        result.m = ell
        return result

    def __str__(self) -> str:
        if not self:
            return ""
        return "{" + ", ".join(_body(c) for c in self) + "}"

    def __repr__(self) -> str:
        return f"Curves collection with {len(self)} curves"