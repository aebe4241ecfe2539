"""Unit tests for hubctl.api.config.CtlConfig."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from hubctl.api.config.CtlConfig import CtlConfig


def test_defaults_match_installer_paths():
    config = CtlConfig()
    assert config.service.unit_name == "comelit-hub-hap"
    assert config.service.label == "com.comelit.hub.hap"
    assert config.service.plist_path == "/Library/LaunchDaemons/com.comelit.hub.hap.plist"
    assert config.service.pid_file_linux == "/run/comelit-hub-hap/comelit-hub-hap.pid"
    assert config.service.pid_file_darwin == "/var/lib/comelit-hub-hap/comelit-hub-hap.pid"
    assert config.log.log_dir == "/var/log/comelit-hub-hap"
    assert config.log.layout == "directory"
    assert config.log.default_lines == 50
    assert config.data_dir == "/var/lib/comelit-hub-hap"


def test_get_home_dir_from_env(tmp_path, monkeypatch):
    monkeypatch.setenv("HUBCTL_HOME", str(tmp_path))
    assert CtlConfig.get_home_dir() == tmp_path.resolve()
    assert CtlConfig.get_config_path() == tmp_path.resolve() / "config.json"


def test_get_home_dir_default(monkeypatch):
    monkeypatch.delenv("HUBCTL_HOME", raising=False)
    assert CtlConfig.get_home_dir() == Path("/etc/comelit-hub-hap")


def test_load_missing_file_gives_defaults(tmp_path, monkeypatch):
    monkeypatch.setenv("HUBCTL_HOME", str(tmp_path))
    assert CtlConfig.load() == CtlConfig()


def test_load_applies_overrides(hub_home):
    config = CtlConfig.load()
    assert config.log.log_dir == str(hub_home / "log")
    assert config.service.restart_delay_secs == 0
    # Untouched fields keep their defaults
    assert config.service.label == "com.comelit.hub.hap"


def test_load_invalid_json(tmp_path, monkeypatch):
    monkeypatch.setenv("HUBCTL_HOME", str(tmp_path))
    (tmp_path / "config.json").write_text("{not json")
    with pytest.raises(ValueError, match="Invalid JSON"):
        CtlConfig.load()


def test_load_non_object(tmp_path, monkeypatch):
    monkeypatch.setenv("HUBCTL_HOME", str(tmp_path))
    (tmp_path / "config.json").write_text("[1, 2]")
    with pytest.raises(ValueError, match="must contain a JSON object"):
        CtlConfig.load()


def test_load_validation_error_names_field(tmp_path, monkeypatch):
    monkeypatch.setenv("HUBCTL_HOME", str(tmp_path))
    (tmp_path / "config.json").write_text(json.dumps({"log": {"default_lines": 0}}))
    with pytest.raises(ValueError, match=r"Configuration validation error: log\.default_lines"):
        CtlConfig.load()


def test_unknown_keys_rejected():
    with pytest.raises(ValidationError):
        CtlConfig(**{"service": {"unknown": 1}})


def test_config_is_frozen():
    config = CtlConfig()
    with pytest.raises(ValidationError):
        config.data_dir = "/tmp"


@pytest.mark.parametrize("label", ["nodots", "com..hap", ""])
def test_invalid_label(label):
    with pytest.raises(ValidationError, match="reverse DNS"):
        CtlConfig(**{"service": {"label": label}})


def test_invalid_unit_name():
    with pytest.raises(ValidationError, match="valid systemd unit name"):
        CtlConfig(**{"service": {"unit_name": "bad name"}})


def test_absolute_log_file_rejected():
    with pytest.raises(ValidationError, match="relative to log_dir"):
        CtlConfig(**{"log": {"log_file": "/var/log/x.log"}})


def test_to_dict_round_trips():
    config = CtlConfig()
    assert CtlConfig(**config.to_dict()) == config
