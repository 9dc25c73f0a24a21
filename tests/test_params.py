import pytest

from cumulus.params import (
    format_param,
    load_parameters_from_file,
    parse_param_line,
    write_parameters_to_file,
)


def test_parse_line_splits_name_and_value():
    assert parse_param_line("perlin_frequency [3.000000]") == ("perlin_frequency", "3.000000")


def test_parse_line_tolerates_whitespace():
    assert parse_param_line("  offset   [1, 2, 3]") == ("offset", "1, 2, 3")


@pytest.mark.parametrize("line", ["novalue", "name []", "name[1]", "   "])
def test_parse_malformed_raises(line):
    with pytest.raises(ValueError):
        parse_param_line(line)


def test_format_integer():
    assert format_param("octaves", 8) == "octaves [8]\n"


def test_format_float_uses_six_decimals():
    assert format_param("scale", 4.0) == "scale [4.000000]\n"


def test_format_vector3():
    assert format_param("offset", (1.0, 2.0, 3.0)) == "offset [1.000000, 2.000000, 3.000000]\n"


def test_format_then_parse_round_trip():
    line = format_param("coverage", 0.5).rstrip("\n")
    name, raw = parse_param_line(line)
    assert name == "coverage"
    assert float(raw) == 0.5


def test_format_rejects_bad_vector_length():
    with pytest.raises(ValueError):
        format_param("v", (1.0, 2.0, 3.0, 4.0))


def test_format_rejects_negative_integer():
    with pytest.raises(ValueError):
        format_param("count", -1)


def test_format_rejects_unsupported_type():
    with pytest.raises(TypeError):
        format_param("name", "text")


def test_file_round_trip(tmp_path):
    path = tmp_path / "params.txt"
    params = {"octaves": 8, "frequency": 3.5, "offset": (1.0, -2.5, 0.25), "size": (2.0, 4.0)}
    write_parameters_to_file(path, params)
    assert load_parameters_from_file(path) == params


def test_write_replaces_previous_contents(tmp_path):
    path = tmp_path / "params.txt"
    write_parameters_to_file(path, {"a": 1})
    write_parameters_to_file(path, {"b": 2})
    assert load_parameters_from_file(path) == {"b": 2}


def test_empty_lines_are_skipped(tmp_path):
    path = tmp_path / "params.txt"
    path.write_text("a [1]\n\nb [2]\n")
    assert load_parameters_from_file(path) == {"a": 1, "b": 2}


def test_empty_file_gives_no_parameters(tmp_path):
    path = tmp_path / "params.txt"
    path.write_text("")
    assert load_parameters_from_file(path) == {}


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_parameters_from_file(tmp_path / "missing.txt")


def test_malformed_line_in_file_raises(tmp_path):
    path = tmp_path / "params.txt"
    path.write_text("good [1]\nbad\n")
    with pytest.raises(ValueError):
        load_parameters_from_file(path)