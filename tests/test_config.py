"""
Tests for the configuration manager

Covers YAML/JSON loading, built-in defaults and environment overrides.
"""

import json

import pytest

from archiver.core.base import ConfigurationError
from archiver.core.config import ConfigManager, LoggingConfig, DEFAULT_CONFIG_PATH


def test_defaults_when_file_missing(tmp_path):
    manager = ConfigManager(str(tmp_path / "missing.yaml"), environ={})
    manager.load_config()

    assert manager.logging_config == LoggingConfig()
    assert not (tmp_path / "missing.yaml").exists()


def test_default_path():
    assert ConfigManager(environ={}).config_path == DEFAULT_CONFIG_PATH
    assert ConfigManager(environ={"ARCHIVER_CONFIG": "/etc/a.yaml"}).config_path == "/etc/a.yaml"
    assert ConfigManager("b.yaml", environ={"ARCHIVER_CONFIG": "/etc/a.yaml"}).config_path == "b.yaml"


def test_load_yaml(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text(
        "logging:\n"
        "  level: debug\n"
        "  file: logs/archiver.log\n"
        "  max_size: 1MB\n"
        "  backup_count: 7\n",
        encoding="utf-8"
    )

    manager = ConfigManager(str(config_file), environ={})
    manager.load_config()

    assert manager.logging_config == LoggingConfig(
        level="DEBUG", file="logs/archiver.log", max_size="1MB", backup_count=7
    )


def test_load_json(tmp_path):
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps({"logging": {"level": "WARNING"}}), encoding="utf-8")

    manager = ConfigManager(str(config_file), environ={})
    manager.load_config()

    assert manager.logging_config.level == "WARNING"
    assert manager.logging_config.file is None


def test_empty_yaml(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("", encoding="utf-8")

    manager = ConfigManager(str(config_file), environ={})
    manager.load_config()

    assert manager.logging_config == LoggingConfig()


def test_log_level_env_override(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("logging:\n  level: INFO\n", encoding="utf-8")

    manager = ConfigManager(str(config_file), environ={"LOG_LEVEL": "error"})
    manager.load_config()

    assert manager.logging_config.level == "ERROR"


@pytest.mark.parametrize("content", [
    "logging: [unclosed\n",
    "- just\n- a list\n",
    "logging: plain\n",
    "logging:\n  level: LOUD\n",
    "logging:\n  backup_count: many\n",
    "logging:\n  max_size: ten\n",
])
def test_invalid_config(tmp_path, content):
    config_file = tmp_path / "config.yaml"
    config_file.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigurationError):
        ConfigManager(str(config_file), environ={}).load_config()
