"""Clusters of points and the clustering configuration."""

from __future__ import annotations

from dataclasses import dataclass

from proximity.point import Point


@dataclass
class ClusterConfig:
    """Settings read from a clustering configuration file; -1 means unset."""

    number_of_clusters: int = -1
    number_of_vector_hash_tables: int = -1
    number_of_vector_hash_functions: int = -1
    max_number_M_hypercube: int = -1
    number_of_hypercube_dimensions: int = -1
    number_of_probes: int = -1


class Cluster:
    """A centroid together with the points assigned to it."""

    def __init__(self, centroid: Point) -> None:
        self.centroid = centroid
        self.points: list[Point] = []

    def add_point(self, point: Point) -> None:
        self.points.append(point)

    def update(self, update_method: str = "Mean Vector") -> float:
        """Move the centroid to the mean of the assigned points.

        Every update method uses the mean vector. Returns how far the
        centroid moved.
        """
        return self._mean_vector()

    def _mean_vector(self) -> float:
        if not self.points:
            raise ValueError("Cannot update a cluster with no points")
        count = len(self.points)
        dims = self.points[0].d
        columns = zip(*(p.pos[:dims] for p in self.points))
        new_centre = Point([sum(column) / count for column in columns], "Centroid")
        moved = new_centre.distance(self.centroid)
        self.centroid = new_centre
        return moved