import pytest
from pydantic import ValidationError

from simplelog.config import validate_config


# This test checks if defaults are applied and the name is normalized.
def test_config_validator__defaults_and_normalized_name():
    cfg = validate_config({"name": "  Demo  "})
    assert cfg.name == "Demo"
    assert cfg.path is None
    assert cfg.console == "stderr"
    print("\n.✅test_config_validator__defaults_and_normalized_name passed")


# This test checks if the sentinel and explicit directories pass through unchanged.
@pytest.mark.parametrize("path", ["NoFileHandler", "", "/var/log/app"])
def test_config_validator__path_passes_through(path):
    assert validate_config({"name": "Demo", "path": path}).path == path


# This test checks if an empty or missing name is rejected.
def test_config_validator__rejects_empty_or_missing_name():
    with pytest.raises(ValidationError):
        _ = validate_config({"name": "   "})
    with pytest.raises(ValidationError):
        _ = validate_config({"path": "/tmp"})


# This test checks if only stderr and stdout are accepted as console targets.
def test_config_validator__rejects_unknown_console():
    with pytest.raises(ValidationError):
        _ = validate_config({"name": "Demo", "console": "syslog"})
