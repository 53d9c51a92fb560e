# -*- coding: utf-8 -*-
"""Tests for configuration loading."""
from __future__ import annotations

import importlib
import json

import pytest
import yaml

from bugcheck.analyzers import DETECTOR_NAMES
from bugcheck.core.base_analyzer import AnalysisOptions
from bugcheck.core.config_manager import DETECTOR_KEYS, ConfigManager
from bugcheck.core.error_handler import ConfigurationError


def test_defaults():
    config = ConfigManager()

    assert config.to_options() == AnalysisOptions(strict_mode=False, tab_size=4)
    assert config.get("output.format") == "console"
    assert config.disabled_detectors() == set()
    assert config.validate_config() == []


def test_detector_keys_match_registry():
    assert set(DETECTOR_KEYS) == set(DETECTOR_NAMES)


def test_json_file_is_merged(tmp_path):
    path = tmp_path / "bugcheck.json"
    path.write_text(
        json.dumps({"analysis": {"tab_size": 2}, "detectors": {"style": {"enabled": False}}}),
        encoding="utf-8",
    )
    config = ConfigManager(str(path))

    assert config.to_options().tab_size == 2
    assert config.get("analysis.strict_mode") is False
    assert config.disabled_detectors() == {"style"}


def test_yaml_file_is_merged(tmp_path):
    path = tmp_path / "bugcheck.yaml"
    path.write_text("analysis:\n  strict_mode: true\noutput:\n  format: json\n", encoding="utf-8")
    config = ConfigManager(str(path))

    assert config.to_options().strict_mode is True
    assert config.get("output.format") == "json"


def test_environment_overrides(tmp_path, monkeypatch):
    monkeypatch.setenv("BUGCHECK_TAB_SIZE", "8")
    monkeypatch.setenv("BUGCHECK_STRICT_MODE", "yes")
    monkeypatch.setenv("BUGCHECK_LANGUAGE", "python")

    config = ConfigManager()

    assert config.to_options() == AnalysisOptions(strict_mode=True, tab_size=8)
    assert config.get("analysis.language") == "python"


def test_invalid_environment_value_is_ignored(monkeypatch):
    monkeypatch.setenv("BUGCHECK_TAB_SIZE", "wide")
    assert ConfigManager().to_options().tab_size == 4


@pytest.mark.parametrize(
    "name, content",
    [
        ("broken.json", "{not json"),
        ("broken.yaml", "analysis: [unclosed"),
        ("config.ini", "[analysis]"),
        ("list.yaml", "- a\n- b\n"),
    ],
)
def test_bad_config_files_raise(tmp_path, name, content):
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigurationError):
        ConfigManager(str(path))


def test_missing_config_file_raises(tmp_path):
    with pytest.raises(ConfigurationError):
        ConfigManager(str(tmp_path / "nope.json"))


def test_validate_reports_problems():
    config = ConfigManager()
    config.set("analysis.tab_size", 0)
    config.set("output.format", "xml")
    config.set("output.min_severity", "fatal")
    config.set("detectors.mystery", {"enabled": True})

    problems = config.validate_config()

    assert len(problems) == 4
    assert any("tab_size" in p for p in problems)
    assert any("xml" in p for p in problems)


def test_save_config_round_trip(tmp_path):
    config = ConfigManager()
    config.set("analysis.tab_size", 3)
    path = tmp_path / "saved.yaml"

    config.save_config(str(path))

    assert yaml.safe_load(path.read_text(encoding="utf-8"))["analysis"]["tab_size"] == 3
    assert ConfigManager(str(path)).to_options().tab_size == 3


def test_config_module_imports_on_its_own():
    module = importlib.import_module("bugcheck.core.config_manager")

    assert module.ConfigManager().disabled_detectors() == set()


def test_boolean_detector_shorthand(tmp_path):
    path = tmp_path / "bugcheck.yaml"
    path.write_text("detectors:\n  style: false\n  nesting: true\n", encoding="utf-8")

    config = ConfigManager(str(path))

    assert config.disabled_detectors() == {"style"}
    assert config.validate_config() == []


def test_disable_after_boolean_shorthand():
    config = ConfigManager()
    config.set("detectors.style", True)

    config.set("detectors.style.enabled", False)

    assert config.disabled_detectors() == {"style"}


def test_malformed_detector_entry_rejected():
    config = ConfigManager()
    config.set("detectors.style", "off")

    with pytest.raises(ConfigurationError):
        config.disabled_detectors()
