"""
Configuration management for bugcheck.

This module handles loading, merging, and validating configuration
from multiple sources including files, environment variables, and defaults.
"""

import copy
import json
import os
from pathlib import Path
from typing import Any

import yaml

from .base_analyzer import AnalysisOptions, Language, Severity
from .error_handler import ConfigurationError, ErrorHandler

DETECTOR_KEYS = (
    "syntax",
    "brackets",
    "unused_variables",
    "infinite_loops",
    "unreachable_code",
    "nesting",
    "style",
    "strict_mode",
)
OUTPUT_FORMATS = {"text", "console", "json", "sarif"}


class ConfigManager:
    """Manages configuration for bugcheck runs."""

    def __init__(self, config_path: str | None = None):
        """Initialize configuration manager."""
        self.config_path = config_path
        self.error_handler = ErrorHandler("bugcheck.config")
        self._config: dict[str, Any] = {}
        self._load_default_config()
        if config_path:
            self._load_config_file(config_path)
        self._load_environment_overrides()

    def _load_default_config(self) -> None:
        """Load default configuration."""
        self._config = {
            "analysis": {
                "language": None,  # None = detect from file name
                "strict_mode": False,
                "tab_size": 4,
            },
            "detectors": {name: {"enabled": True} for name in DETECTOR_KEYS},
            "output": {
                "format": "console",  # text, console, json, sarif
                "file": None,
                "use_colors": True,
                "show_suggestions": True,
                "min_severity": None,
            },
        }

    def _load_config_file(self, config_path: str) -> None:
        """Load configuration from a JSON or YAML file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigurationError(f"Config file {config_path} not found")

        suffix = path.suffix.lower()
        try:
            with path.open(encoding="utf-8") as f:
                if suffix == ".json":
                    file_config = json.load(f)
                elif suffix in (".yml", ".yaml"):
                    file_config = yaml.safe_load(f) or {}
                else:
                    raise ConfigurationError(
                        f"Unsupported config file format: {path.suffix}"
                    )
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(
                f"Failed to parse config file {config_path}: {e}"
            ) from e
        except OSError as e:
            raise ConfigurationError(
                f"Error loading config file {config_path}: {e}"
            ) from e

        if not isinstance(file_config, dict):
            raise ConfigurationError(
                f"Config file {config_path} must contain a mapping at the top level"
            )

        self.error_handler.logger.debug("Loaded configuration from %s", config_path)
        self._merge_config(file_config)

    def _load_environment_overrides(self) -> None:
        """Load configuration overrides from environment variables."""
        env_mappings = {
            "BUGCHECK_STRICT_MODE": ("analysis.strict_mode", bool),
            "BUGCHECK_TAB_SIZE": ("analysis.tab_size", int),
            "BUGCHECK_LANGUAGE": ("analysis.language", str),
            "BUGCHECK_OUTPUT_FORMAT": ("output.format", str),
        }

        for env_var, (config_path, converter) in env_mappings.items():
            value = os.getenv(env_var)
            if value is None:
                continue
            try:
                if converter is bool:
                    converted_value = value.lower() in ("true", "1", "yes", "on")
                else:
                    converted_value = converter(value)
            except (ValueError, TypeError) as e:
                self.error_handler.logger.warning(
                    "Invalid value for %s: %s (%s)", env_var, value, e
                )
                continue
            self._set_nested_config(config_path, converted_value)

    def _merge_config(self, new_config: dict[str, Any]) -> None:
        """Merge new configuration with existing configuration."""
        self._config = self._deep_merge(self._config, new_config)

    def _deep_merge(
        self, base: dict[str, Any], update: dict[str, Any]
    ) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in update.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result

    def _set_nested_config(self, path: str, value: Any) -> None:
        """Set a nested configuration value using dot notation."""
        keys = path.split(".")
        current = self._config

        for key in keys[:-1]:
            if not isinstance(current.get(key), dict):
                current[key] = {}
            current = current[key]

        current[keys[-1]] = value

    def set(self, path: str, value: Any) -> None:
        """Set a configuration value using dot notation."""
        self._set_nested_config(path, value)

    def get(self, path: str, default: Any = None) -> Any:
        """Get a configuration value using dot notation."""
        keys = path.split(".")
        current = self._config

        try:
            for key in keys:
                current = current[key]
            return current
        except (KeyError, TypeError):
            return default

    def is_detector_enabled(self, name: str) -> bool:
        """Check if a detector is enabled.

        A detector entry is either a mapping with an ``enabled`` key or a bare
        boolean shorthand (``style: false``).
        """
        detector_config = self.get(f"detectors.{name}", {})
        if isinstance(detector_config, bool):
            return detector_config
        if not isinstance(detector_config, dict):
            raise ConfigurationError(
                f"Detector '{name}' config must be a dictionary or a boolean"
            )
        return bool(detector_config.get("enabled", True))

    def disabled_detectors(self) -> "set[str]":
        """Names of detectors switched off in configuration."""
        detectors = self.get("detectors", {}) or {}
        return {name for name in detectors if not self.is_detector_enabled(name)}

    def get_output_config(self) -> dict[str, Any]:
        """Get output configuration."""
        return self.get("output", {})

    def to_options(self) -> AnalysisOptions:
        """Build the analysis options value from configuration."""
        tab_size = self.get("analysis.tab_size", 4)
        try:
            tab_size = int(tab_size)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid tab_size: {tab_size!r}") from e
        return AnalysisOptions(
            strict_mode=bool(self.get("analysis.strict_mode", False)),
            tab_size=tab_size,
        )

    def validate_config(self) -> list[str]:
        """Validate configuration and return list of issues."""
        issues = []

        tab_size = self.get("analysis.tab_size")
        if not isinstance(tab_size, int) or isinstance(tab_size, bool) or tab_size < 1:
            issues.append(f"analysis.tab_size must be an integer >= 1, got {tab_size!r}")

        language = self.get("analysis.language")
        if language is not None and Language.resolve(language) is None:
            issues.append(
                f"Unknown language '{language}'; default rule sets will be used"
            )

        output_format = self.get("output.format", "console")
        if output_format not in OUTPUT_FORMATS:
            issues.append(
                f"Invalid output format '{output_format}'. "
                f"Must be one of: {sorted(OUTPUT_FORMATS)}"
            )

        min_severity = self.get("output.min_severity")
        if min_severity is not None:
            try:
                Severity.parse(min_severity)
            except ValueError:
                issues.append(f"Invalid severity '{min_severity}' in output.min_severity")

        detectors = self.get("detectors", {}) or {}
        for name, detector_config in detectors.items():
            if name not in DETECTOR_KEYS:
                issues.append(f"Unknown detector '{name}'")
            elif not isinstance(detector_config, (dict, bool)):
                issues.append(
                    f"Detector '{name}' config must be a dictionary or a boolean"
                )

        return issues

    def save_config(self, output_path: str) -> None:
        """Save current configuration to file."""
        path = Path(output_path)
        suffix = path.suffix.lower()

        if suffix not in (".json", ".yml", ".yaml"):
            raise ConfigurationError(f"Unsupported config file format: {path.suffix}")

        with self.error_handler.handle_file_operation(output_path, "write"):
            with path.open("w", encoding="utf-8") as f:
                if suffix == ".json":
                    json.dump(self._config, f, indent=2, sort_keys=True)
                else:
                    yaml.safe_dump(
                        self._config, f, default_flow_style=False, sort_keys=True
                    )

    def to_dict(self) -> dict[str, Any]:
        """Return configuration as dictionary."""
        return copy.deepcopy(self._config)

    def __repr__(self) -> str:
        """Return string representation of configuration."""
        return f"ConfigManager(config_path={self.config_path})"
