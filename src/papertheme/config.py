# src/papertheme/config.py
"""Configuration loading utilities for papertheme.

This module provides configuration loading that can be used by:
- CLI commands
- External applications using papertheme as a library

It handles:
- Finding and loading papertheme.yaml config files
- Reading PAPERTHEME_* environment variables
- Building Settings objects from multiple sources

Example papertheme.yaml:
    output: src/theme.css
    settings:
      seed_color: "#1976D2"
      contrast: 0.5
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from papertheme.settings import Settings

try:
    import yaml  # type: ignore[import-untyped]

    YAML_AVAILABLE = True
except ImportError:
    YAML_AVAILABLE = False

logger = logging.getLogger(__name__)

CONFIG_FILES = ["papertheme.yaml", "papertheme.yml", ".papertheme"]


@dataclass
class ConfigError:
    """Error during configuration loading."""

    message: str
    suggestion: str | None = None


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find configuration file in current directory or parent directories.

    Args:
        start_dir: Directory to start searching from (default: cwd)

    Returns:
        Path to config file if found, None otherwise
    """
    current = start_dir or Path.cwd()
    for _ in range(10):  # Limit search depth
        for config_name in CONFIG_FILES:
            config_path = current / config_name
            if config_path.exists():
                return config_path
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


VALID_ROOT_KEYS = {
    "output",
    "settings",
}

VALID_SETTINGS_KEYS = {
    "seed_color",
    "seed",  # alias
    "hue",
    "contrast",
    "contrast_preset",
    "generator",
    "output",
    "selector",
}


def validate_config(config: dict[str, Any], config_path: Path | None = None) -> list[str]:
    """Validate config and return warnings about unknown keys.

    Args:
        config: The loaded configuration dictionary
        config_path: Path to config file (for error messages)

    Returns:
        List of warning messages (empty if no issues)
    """
    warnings = []

    unknown_root = set(config.keys()) - VALID_ROOT_KEYS
    if unknown_root:
        path_str = str(config_path) if config_path else "config"
        warnings.append(f"Unknown config keys in {path_str}: {', '.join(sorted(unknown_root))}")

    settings = config.get("settings", {})
    if isinstance(settings, dict):
        unknown_settings = set(settings.keys()) - VALID_SETTINGS_KEYS
        if unknown_settings:
            warnings.append(f"Unknown settings keys: {', '.join(sorted(unknown_settings))}")

    return warnings


def load_config(config_path: Path | str | None = None) -> dict[str, Any]:
    """Load configuration from YAML file.

    Args:
        config_path: Explicit path to config file, or None to search

    Returns:
        Configuration dictionary (empty if no config found)
    """
    config_path = Path(config_path) if config_path is not None else find_config_file()

    if config_path is None:
        return {}

    if not YAML_AVAILABLE:
        logger.warning("Ignoring %s: pyyaml is not installed", config_path)
        return {}

    with open(config_path, encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}

    if not isinstance(config, dict):
        raise ValueError(f"{config_path} must contain a mapping, not {type(config).__name__}")

    settings = config.get("settings")
    if settings is not None and not isinstance(settings, dict):
        raise ValueError(
            f"'settings' in {config_path} must be a mapping, not {type(settings).__name__}"
        )

    for warning in validate_config(config, config_path):
        logger.warning(warning)

    return config


def _safe_float(value: str | None) -> float | None:
    """Parse float from string, returning None on invalid value."""
    if value is None or value == "":
        return None
    try:
        return float(value)
    except ValueError:
        return None


def get_settings_from_env() -> dict[str, Any]:
    """Read settings from PAPERTHEME_* environment variables.

    Only explicitly set variables are returned, so YAML values survive
    unless overridden.

    Returns:
        Dictionary of setting name -> value for explicitly set env vars
    """
    result: dict[str, Any] = {}

    if os.environ.get("PAPERTHEME_SEED_COLOR"):
        result["seed_color"] = os.environ["PAPERTHEME_SEED_COLOR"]
    if (val := _safe_float(os.environ.get("PAPERTHEME_HUE"))) is not None:
        result["hue"] = val
    if (val := _safe_float(os.environ.get("PAPERTHEME_CONTRAST"))) is not None:
        result["contrast"] = val
    if os.environ.get("PAPERTHEME_CONTRAST_PRESET"):
        result["contrast_preset"] = os.environ["PAPERTHEME_CONTRAST_PRESET"]
    if os.environ.get("PAPERTHEME_GENERATOR"):
        result["generator"] = os.environ["PAPERTHEME_GENERATOR"]
    if os.environ.get("PAPERTHEME_OUTPUT"):
        result["output"] = os.environ["PAPERTHEME_OUTPUT"]

    return result


def get_settings_from_yaml(config: dict[str, Any]) -> dict[str, Any]:
    """Extract settings from YAML config file.

    Settings live in a 'settings:' section; a root-level 'output' is also
    accepted.

    Args:
        config: The loaded YAML configuration

    Returns:
        Dictionary of setting name -> value
    """
    result: dict[str, Any] = {}

    if "output" in config:
        result["output"] = config["output"]

    yaml_settings = config.get("settings", {}) or {}

    key_mappings = {
        "seed_color": "seed_color",
        "seed": "seed_color",  # alias
        "hue": "hue",
        "contrast": "contrast",
        "contrast_preset": "contrast_preset",
        "generator": "generator",
        "output": "output",
        "selector": "selector",
    }

    for yaml_key, settings_key in key_mappings.items():
        if yaml_key in yaml_settings:
            result[settings_key] = yaml_settings[yaml_key]

    return result


def build_settings(
    config: dict[str, Any] | None = None,
    env_settings: dict[str, Any] | None = None,
    overrides: dict[str, Any] | None = None,
) -> Settings:
    """Build Settings object from YAML config, env vars and explicit values.

    Precedence (highest to lowest):
    1. Explicit overrides (CLI options); None values are ignored
    2. Environment variables
    3. YAML settings: section
    4. Settings class defaults

    A seed color beats a hue from the same source, and an explicit contrast
    beats a contrast preset.

    Args:
        config: YAML configuration dictionary
        env_settings: Environment variable overrides (if None, reads from env)
        overrides: Explicit values, e.g. from command-line options

    Returns:
        Configured Settings instance
    """
    from papertheme.colors import seed_from_hue
    from papertheme.settings import Settings

    config = config or {}
    yaml_settings = get_settings_from_yaml(config)
    env_settings = env_settings if env_settings is not None else get_settings_from_env()
    explicit = {k: v for k, v in (overrides or {}).items() if v is not None}

    merged: dict[str, Any] = {}
    for layer in (yaml_settings, env_settings, explicit):
        layer = dict(layer)
        if "seed_color" in layer:
            layer.pop("hue", None)
        if "contrast" in layer:
            layer.pop("contrast_preset", None)

        # A hue in a higher layer replaces a seed from a lower one, and vice versa
        if "hue" in layer:
            merged.pop("seed_color", None)
        if "seed_color" in layer:
            merged.pop("hue", None)
        if "contrast_preset" in layer:
            merged.pop("contrast", None)
        if "contrast" in layer:
            merged.pop("contrast_preset", None)
        merged.update(layer)

    hue = merged.pop("hue", None)
    if hue is not None:
        merged["seed_color"] = seed_from_hue(float(hue))

    contrast_preset = merged.pop("contrast_preset", None)
    if contrast_preset:
        return Settings.with_preset(contrast_preset, **merged)
    return Settings(**merged)


def get_settings(
    config_path: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> Settings | ConfigError:
    """Load the config file and build Settings, reporting problems as data.

    Args:
        config_path: Override config file path (default: search from cwd)
        overrides: Explicit values, e.g. from command-line options

    Returns:
        Settings, or ConfigError if the config cannot be read or a value is invalid
    """
    from pydantic import ValidationError

    try:
        config = load_config(config_path)
    except OSError as e:
        return ConfigError(
            message=f"Cannot read config file: {e}",
            suggestion="Check the --config path",
        )
    except ValueError as e:
        return ConfigError(
            message=str(e),
            suggestion="Put settings under a 'settings:' key",
        )
    except yaml.YAMLError as e:
        return ConfigError(
            message=f"Invalid YAML in config file: {e}",
            suggestion="Fix the syntax in the config file",
        )

    try:
        return build_settings(config, overrides=overrides)
    except ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in e.errors()
        )
        return ConfigError(
            message=f"Invalid settings: {details}",
            suggestion="Seed colors look like '#1976D2'; contrast is between -1.0 and 1.0",
        )
    except ValueError as e:
        return ConfigError(message=str(e))
