import yaml
import pytest

from simplelog.config import load_yaml


def test_config_loader__loads_valid_yaml_to_dict(tmp_path):
    p = tmp_path / "logger.yaml"
    p.write_text("name: Demo\npath: NoFileHandler\nconsole: stdout\n", encoding="utf-8")
    data = load_yaml(str(p))
    assert data == {"name": "Demo", "path": "NoFileHandler", "console": "stdout"}


def test_config_loader__empty_file_is_empty_mapping(tmp_path):
    p = tmp_path / "empty.yaml"
    p.write_text("", encoding="utf-8")
    assert load_yaml(str(p)) == {}


def test_config_loader__malformed_yaml_raises_clear_error(tmp_path):
    p = tmp_path / "bad.yaml"
    p.write_text("name: Demo\npath: [broken\n", encoding="utf-8")  # missing closing bracket
    with pytest.raises(yaml.YAMLError):
        _ = load_yaml(str(p))


def test_config_loader__non_mapping_top_level_raises_value_error(tmp_path):
    p = tmp_path / "list.yaml"
    p.write_text("- Demo\n- other\n", encoding="utf-8")
    with pytest.raises(ValueError):
        _ = load_yaml(str(p))


def test_config_loader__missing_config_file_raises_clear_error(tmp_path):
    missing = tmp_path / "nope.yaml"
    with pytest.raises(FileNotFoundError):
        _ = load_yaml(str(missing))
