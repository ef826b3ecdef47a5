from proximity.cluster import Cluster
from proximity.output import (
    cluster_output,
    format_cluster_report,
    format_search_report,
    search_output,
)
from proximity.point import Point


def _search_fixture():
    q = Point([0.0, 0.0], "q1")
    p = Point([3.0, 4.0], "p1")
    return [q], [[p]], [[p]]


def test_search_report_lines():
    queries, res, true_res = _search_fixture()
    text = format_search_report(res, true_res, queries, "LSH", 2.5, 7.0)
    lines = text.splitlines()
    assert lines[0] == "Query: q1"
    assert lines[1] == "Algorithm: LSH"
    assert lines[2] == "Approximate Nearest neighbor: p1"
    assert lines[3] == "True Nearest neighbor: p1"
    assert lines[4].startswith("distanceApproximate: ")
    assert lines[4].split(": ")[1] == lines[5].split(": ")[1]
    assert lines[6] == ""
    assert lines[7] == "tApproximateAverage: 2.5 ms"
    assert lines[8] == "tTrueAverage: 7 ms"
    assert lines[9] == "MAF: 1"


def test_search_report_maf_exceeds_one_for_worse_answer():
    q = Point([0.0], "q")
    near = Point([1.0], "near")
    far = Point([4.0], "far")
    text = format_search_report([[far]], [[near]], [q], "Hypercube", 0, 0)
    maf_line = text.splitlines()[-1]
    assert maf_line.startswith("MAF: ")
    assert float(maf_line.split()[1]) > 1


def test_search_output_falls_back_to_stdout(capsys):
    queries, res, true_res = _search_fixture()
    search_output(res, true_res, queries, "LSH", 1.0, 1.0, "")
    expected = format_search_report(res, true_res, queries, "LSH", 1.0, 1.0)
    assert capsys.readouterr().out == expected


def test_search_output_writes_file(tmp_path):
    queries, res, true_res = _search_fixture()
    path = tmp_path / "out.txt"
    search_output(res, true_res, queries, "LSH", 1.0, 1.0, str(path))
    expected = format_search_report(res, true_res, queries, "LSH", 1.0, 1.0)
    assert path.read_text(encoding="utf-8") == expected


def _clusters():
    cluster = Cluster(Point([1.0, 2.0], "Centroid"))
    cluster.add_point(Point([0.0, 0.0], "a"))
    cluster.add_point(Point([2.0, 4.0], "b"))
    return [cluster]


def test_cluster_report_basic():
    clusters = _clusters()
    text = format_cluster_report("Classic", clusters, 12, [], False, False)
    assert text.startswith("Algorithm: Classic\n")
    centroid = clusters[0].centroid.to_str()
    assert f"CLUSTER-1 {{size: 2, centroid: {centroid}}}\n" in text
    assert text.endswith("clustering_time: 12 ms\n")
    assert "Silhouette" not in text


def test_cluster_report_with_silhouette_and_members():
    text = format_cluster_report("LSH", _clusters(), 3, [0.5, 0.25], True, True)
    assert "Silhouette: [0.5,0.25]\n" in text
    assert text.endswith("CLUSTER-1 {Centroid,a,b}\n")


def test_cluster_output_writes_file(tmp_path):
    clusters = _clusters()
    path = tmp_path / "clusters.txt"
    cluster_output("Classic", clusters, 5, [0.1], True, True, path)
    expected = format_cluster_report("Classic", clusters, 5, [0.1], True, True)
    assert path.read_text(encoding="utf-8") == expected