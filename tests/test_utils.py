import pytest

from agronomy_engine.utils import load_data, load_json


def test_load_json_success(tmp_path):
    path = tmp_path / "data.json"
    path.write_text('{"a":1}')
    assert load_json(path) == {"a": 1}


def test_load_json_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_json(tmp_path / "missing.json")


def test_load_json_invalid(tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text("{oops}")
    with pytest.raises(ValueError, match="Invalid JSON"):
        load_json(bad)


def test_load_data_json(tmp_path):
    path = tmp_path / "plan.json"
    path.write_text('{"name": "plot"}')
    assert load_data(path) == {"name": "plot"}


def test_load_data_yaml(tmp_path):
    path = tmp_path / "data.yml"
    path.write_text("a: 1\nb:\n  - x\n")
    assert load_data(path) == {"a": 1, "b": ["x"]}
    empty = tmp_path / "empty.yaml"
    empty.write_text("")
    assert load_data(empty) == {}


def test_load_data_missing_yaml(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_data(tmp_path / "missing.yaml")


def test_load_data_invalid_yaml(tmp_path):
    bad = tmp_path / "bad.yaml"
    bad.write_text("a: [1, 2\n")
    with pytest.raises(ValueError, match="Invalid YAML"):
        load_data(bad)
