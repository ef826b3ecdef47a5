import random

import pytest

from proximity.kmeans import initialize_clusters
from proximity.point import Point


def make_points():
    return [Point([float(i), float(i % 3)], f"p{i}") for i in range(10)]


def test_returns_requested_number_of_clusters():
    points = make_points()
    clusters = initialize_clusters(points, 4)
    assert len(clusters) == 4


def test_centroids_are_distinct_input_points():
    points = make_points()
    clusters = initialize_clusters(points, 5)
    centroids = [c.centroid for c in clusters]
    assert len({id(c) for c in centroids}) == 5
    assert all(any(c is p for p in points) for c in centroids)


def test_clusters_start_empty():
    clusters = initialize_clusters(make_points(), 3)
    assert all(c.points == [] for c in clusters)


def test_input_is_not_modified():
    points = make_points()
    before = list(points)
    initialize_clusters(points, 3)
    assert points == before


def test_single_cluster():
    points = make_points()
    clusters = initialize_clusters(points, 1)
    assert len(clusters) == 1
    assert any(clusters[0].centroid is p for p in points)


def test_all_points_as_clusters():
    points = make_points()
    clusters = initialize_clusters(points, len(points))
    assert {id(c.centroid) for c in clusters} == {id(p) for p in points}


def test_separated_groups_get_separate_centroids():
    random.seed(7)
    group_a = [Point([0.0, 0.0]), Point([0.1, 0.0]), Point([0.0, 0.1])]
    group_b = [Point([1000.0, 0.0]), Point([1000.1, 0.0]), Point([1000.0, 0.1])]
    clusters = initialize_clusters(group_a + group_b, 2)
    xs = sorted(c.centroid.pos[0] for c in clusters)
    assert xs[1] - xs[0] > 500


def test_identical_points_still_give_distinct_centroids():
    points = [Point([1.0, 1.0], f"p{i}") for i in range(4)]
    clusters = initialize_clusters(points, 3)
    assert len({id(c.centroid) for c in clusters}) == 3


@pytest.mark.parametrize("k", [0, -1, 11])
def test_invalid_k_raises(k):
    with pytest.raises(ValueError):
        initialize_clusters(make_points(), k)


def test_no_points_raises():
    with pytest.raises(ValueError):
        initialize_clusters([], 1)