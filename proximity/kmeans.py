"""K-means++ choice of initial cluster centroids."""

from __future__ import annotations

import random
from collections.abc import Sequence

from proximity.cluster import Cluster
from proximity.point import Point


def initialize_clusters(points: Sequence[Point], k: int) -> list[Cluster]:
    """Pick ``k`` distinct input points as centroids, k-means++ style.

    The first centroid is chosen uniformly. Each further one is drawn with
    probability proportional to the squared distance to its nearest
    centroid chosen so far. The input sequence is left unchanged.
    """
    if not points:
        raise ValueError("Cannot initialise clusters without points")
    if not 1 <= k <= len(points):
        raise ValueError(f"Number of clusters must be between 1 and {len(points)}, got {k}")

    remaining = list(points)
    clusters = [Cluster(remaining.pop(random.randrange(len(remaining))))]
    while len(clusters) < k:
        weights = [
            min(p.distance(c.centroid) for c in clusters) ** 2 for p in remaining
        ]
        if sum(weights) > 0:
            index = random.choices(range(len(remaining)), weights=weights)[0]
        else:
            index = random.randrange(len(remaining))
        clusters.append(Cluster(remaining.pop(index)))
    return clusters