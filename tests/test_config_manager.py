import json

from PyQt6.QtCore import QByteArray

from constants import DISMISS_DELAY_SECONDS, MAX_LOG_LINES
from core.config_manager import ConfigManager


def test_values_are_persisted(tmp_path):
    config = ConfigManager(config_dir=tmp_path)
    config.setValue("theme", "dark")

    assert ConfigManager(config_dir=tmp_path).value("theme") == "dark"
    assert json.loads((tmp_path / "config.json").read_text(encoding="utf-8")) == {"theme": "dark"}


def test_geometry_round_trips_as_bytes(tmp_path):
    config = ConfigManager(config_dir=tmp_path)
    config.setValue("geometry", QByteArray(b"\x01\x02\x03"))

    assert ConfigManager(config_dir=tmp_path).value("geometry").data() == b"\x01\x02\x03"


def test_remove_and_contains(tmp_path):
    config = ConfigManager(config_dir=tmp_path)
    config.setValue("key", 1)
    assert config.contains("key")
    assert config.allKeys() == ["key"]

    config.remove("key")
    assert not config.contains("key")


def test_corrupt_config_starts_empty(tmp_path):
    (tmp_path / "config.json").write_text("[1, 2", encoding="utf-8")

    assert ConfigManager(config_dir=tmp_path).allKeys() == []


def test_lifecycle_defaults(tmp_path):
    config = ConfigManager(config_dir=tmp_path)

    assert config.get_dismiss_delay() == DISMISS_DELAY_SECONDS
    assert config.get_max_log_lines() == MAX_LOG_LINES


def test_lifecycle_overrides(tmp_path):
    config = ConfigManager(config_dir=tmp_path)
    config.setValue("dismiss_delay_seconds", "2.5")
    config.setValue("max_log_lines", 0)

    assert config.get_dismiss_delay() == 2.5
    assert config.get_max_log_lines() is None


def test_invalid_overrides_fall_back(tmp_path):
    config = ConfigManager(config_dir=tmp_path)
    config.setValue("dismiss_delay_seconds", -3)
    config.setValue("max_log_lines", "many")

    assert config.get_dismiss_delay() == DISMISS_DELAY_SECONDS
    assert config.get_max_log_lines() == MAX_LOG_LINES
