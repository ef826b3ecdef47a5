"""Text reports for search and clustering results."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from os import PathLike

from proximity.cluster import Cluster
from proximity.point import DistanceType, Point

_FLT_MIN = 1.1754943508222875e-38


def _fmt(value: float) -> str:
    return format(value, "g")


def _emit(text: str, outputfile: str | PathLike | None) -> None:
    if outputfile:
        try:
            with open(outputfile, "w", encoding="utf-8") as handle:
                handle.write(text)
        except OSError:
            pass
        else:
            return
    sys.stdout.write(text)


def format_search_report(
    results: Sequence[Sequence[Point]],
    true_results: Sequence[Sequence[Point]],
    queries: Sequence[Point],
    algorithm: str,
    average_duration: float,
    brute_average_duration: float,
    kind: DistanceType = DistanceType.EUCLIDEAN,
) -> str:
    """Per-query neighbours and distances, then timings and the maximum approximation factor."""
    lines: list[str] = []
    maf = -1.0
    for query, approx, exact in zip(queries, results, true_results):
        approx_dist = query.distance(approx[0], kind)
        true_dist = query.distance(exact[0], kind)
        maf = max(maf, approx_dist / (true_dist + _FLT_MIN))
        lines += [
            f"Query: {query.ident}",
            f"Algorithm: {algorithm}",
            f"Approximate Nearest neighbor: {approx[0].ident}",
            f"True Nearest neighbor: {exact[0].ident}",
            f"distanceApproximate: {_fmt(approx_dist)}",
            f"distanceTrue: {_fmt(true_dist)}",
        ]
    lines += [
        "",
        f"tApproximateAverage: {_fmt(average_duration)} ms",
        f"tTrueAverage: {_fmt(brute_average_duration)} ms",
        f"MAF: {_fmt(maf)}",
    ]
    return "\n".join(lines) + "\n"


def search_output(
    results: Sequence[Sequence[Point]],
    true_results: Sequence[Sequence[Point]],
    queries: Sequence[Point],
    algorithm: str,
    average_duration: float,
    brute_average_duration: float,
    outputfile: str | PathLike | None,
    kind: DistanceType = DistanceType.EUCLIDEAN,
) -> None:
    """Write the search report to ``outputfile``, or to stdout if it cannot be opened."""
    report = format_search_report(
        results, true_results, queries, algorithm, average_duration, brute_average_duration, kind
    )
    _emit(report, outputfile)


def format_cluster_report(
    assignment_method: str,
    clusters: Sequence[Cluster],
    duration_ms: int,
    silhouette: Sequence[float],
    silhouettes_enabled: bool,
    complete: bool,
) -> str:
    """Cluster sizes and centroids, timing, optional silhouettes and memberships."""
    parts = [f"Algorithm: {assignment_method}\n"]
    for number, cluster in enumerate(clusters, start=1):
        parts.append(
            f"CLUSTER-{number} {{size: {len(cluster.points)}, "
            f"centroid: {cluster.centroid.to_str()}}}\n"
        )
    parts.append(f"clustering_time: {duration_ms} ms\n")
    if silhouettes_enabled:
        parts.append("Silhouette: [" + ",".join(_fmt(s) for s in silhouette) + "]\n")
    if complete:
        for number, cluster in enumerate(clusters, start=1):
            members = ",".join(p.ident for p in cluster.points)
            parts.append(f"CLUSTER-{number} {{{cluster.centroid.ident},{members}}}\n")
    return "".join(parts)


def cluster_output(
    assignment_method: str,
    clusters: Sequence[Cluster],
    duration_ms: int,
    silhouette: Sequence[float],
    silhouettes_enabled: bool,
    complete: bool,
    outputfile: str | PathLike | None,
) -> None:
    """Write the clustering report to ``outputfile``, or to stdout if it cannot be opened."""
    report = format_cluster_report(
        assignment_method, clusters, duration_ms, silhouette, silhouettes_enabled, complete
    )
    _emit(report, outputfile)