import pytest

from proximity.options import parse_cluster_args, parse_search_args


def test_search_defaults():
    info = parse_search_args([])
    assert info.m == 10
    assert info.probes == 2
    assert info.num_tables == 5
    assert info.k == 4
    assert info.delta == pytest.approx(0.69)
    assert info.continuous is False
    assert info.algorithm == ""


def test_search_all_options():
    info = parse_search_args(
        ["-i", "in.txt", "-q", "q.txt", "-k", "7", "-L", "3", "-o", "out.txt",
         "-M", "20", "-p", "4", "-a", "Hypercube", "-d", "0.5"]
    )
    assert info.inputfile == "in.txt"
    assert info.queryfile == "q.txt"
    assert info.k == 7
    assert info.num_tables == 3
    assert info.outputfile == "out.txt"
    assert info.m == 20
    assert info.probes == 4
    assert info.algorithm == "Hypercube"
    assert info.delta == pytest.approx(0.5)


@pytest.mark.parametrize("algorithm", ["LSH", "Hypercube", "Frechet"])
def test_search_accepts_known_algorithms(algorithm):
    assert parse_search_args(["-a", algorithm]).algorithm == algorithm


def test_search_rejects_unknown_algorithm():
    with pytest.raises(ValueError):
        parse_search_args(["-a", "Annoy"])


def test_search_metric():
    assert parse_search_args(["-m", "continuous"]).continuous is True
    assert parse_search_args(["-m", "discrete"]).continuous is False
    with pytest.raises(ValueError):
        parse_search_args(["-m", "manhattan"])


def test_search_rejects_unknown_option():
    with pytest.raises(ValueError):
        parse_search_args(["-x", "1"])


def test_search_rejects_non_integer():
    with pytest.raises(ValueError):
        parse_search_args(["-k", "many"])


def test_cluster_defaults():
    info = parse_cluster_args(["-i", "in.txt", "-c", "conf.txt"])
    assert info.assignment_method == "Classic"
    assert info.update_method == "Mean Vector"
    assert info.complete is False
    assert info.silhouettes_enabled is False
    assert info.inputfile == "in.txt"
    assert info.configurationfile == "conf.txt"


def test_cluster_flags():
    info = parse_cluster_args(
        ["-i", "in.txt", "-c", "conf.txt", "-o", "out.txt", "-C", "-s",
         "-a", "LSH", "-u", "Mean Frechet"]
    )
    assert info.complete is True
    assert info.silhouettes_enabled is True
    assert info.outputfile == "out.txt"
    assert info.assignment_method == "LSH"
    assert info.update_method == "Mean Frechet"


def test_cluster_requires_input_file():
    with pytest.raises(ValueError):
        parse_cluster_args(["-c", "conf.txt"])


def test_cluster_requires_config_file():
    with pytest.raises(ValueError):
        parse_cluster_args(["-i", "in.txt"])


def test_cluster_rejects_hypercube_with_frechet_update():
    with pytest.raises(ValueError):
        parse_cluster_args(
            ["-i", "in.txt", "-c", "conf.txt", "-a", "Hypercube", "-u", "Mean Frechet"]
        )


@pytest.mark.parametrize(
    "extra", [["-a", "Spectral"], ["-u", "Median"], ["-z"]]
)
def test_cluster_rejects_invalid_values(extra):
    with pytest.raises(ValueError):
        parse_cluster_args(["-i", "in.txt", "-c", "conf.txt", *extra])