import pytest

from proximity.parser import parse_config, parse_input_file


def _write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_parse_points(tmp_path):
    path = _write(tmp_path, "in.tsv", "a\t1\t2\t\nb\t3\t4\t\n")
    points = parse_input_file(path)
    assert [p.ident for p in points] == ["a", "b"]
    assert [p.pos for p in points] == [[1.0, 2.0], [3.0, 4.0]]


def test_text_after_last_tab_is_ignored(tmp_path):
    path = _write(tmp_path, "in.tsv", "a\t1\t2\t3\n")
    points = parse_input_file(path)
    assert points[0].pos == [1.0, 2.0]


def test_rows_of_other_dimension_skipped(tmp_path):
    path = _write(tmp_path, "in.tsv", "a\t1\t2\t\nbad\t1\t\nc\t5\t6\t\n")
    points = parse_input_file(path)
    assert [p.ident for p in points] == ["a", "c"]
    assert all(p.d == 2 for p in points)


def test_empty_file_gives_no_points(tmp_path):
    path = _write(tmp_path, "in.tsv", "")
    assert parse_input_file(path) == []


def test_missing_input_file_raises(tmp_path):
    with pytest.raises(OSError):
        parse_input_file(tmp_path / "absent.tsv")


def test_bad_coordinate_raises(tmp_path):
    path = _write(tmp_path, "in.tsv", "a\tnot-a-number\t\n")
    with pytest.raises(ValueError):
        parse_input_file(path)


def test_parse_full_config(tmp_path):
    text = (
        "number_of_clusters: 4\n"
        "number_of_vector_hash_tables: 3\n"
        "number_of_vector_hash_functions: 5\n"
        "max_number_M_hypercube: 10\n"
        "number_of_hypercube_dimensions: 3\n"
        "number_of_probes: 2\n"
    )
    config = parse_config(_write(tmp_path, "cluster.conf", text))
    assert config.number_of_clusters == 4
    assert config.number_of_vector_hash_tables == 3
    assert config.number_of_vector_hash_functions == 5
    assert config.max_number_M_hypercube == 10
    assert config.number_of_hypercube_dimensions == 3
    assert config.number_of_probes == 2


def test_config_invalid_lines_ignored(tmp_path):
    text = "number_of_clusters: 4\nno delimiter here\nnumber_of_probes: x\nbogus: 3\n"
    config = parse_config(_write(tmp_path, "cluster.conf", text))
    assert config.number_of_clusters == 4
    assert config.number_of_probes == -1
    assert not hasattr(config, "bogus")


def test_missing_config_raises(tmp_path):
    with pytest.raises(OSError):
        parse_config(tmp_path / "absent.conf")