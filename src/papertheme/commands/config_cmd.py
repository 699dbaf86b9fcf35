# src/papertheme/commands/config_cmd.py
"""Config command - display current configuration."""

from __future__ import annotations

from pathlib import Path

from papertheme.commands.base import ConfigResult, SettingInfo
from papertheme.config import (
    ConfigError,
    find_config_file,
    get_settings,
    get_settings_from_env,
    get_settings_from_yaml,
    load_config,
    validate_config,
)

# Settings field -> raw keys that can set it
_SOURCE_KEYS = {
    "seed_color": ("seed_color", "hue"),
    "contrast": ("contrast", "contrast_preset"),
    "generator": ("generator",),
    "output": ("output",),
    "selector": ("selector",),
}


def _get_setting_source(
    key: str,
    yaml_settings: dict,
    env_settings: dict,
) -> str:
    """Determine the source of a setting value."""
    raw_keys = _SOURCE_KEYS.get(key, (key,))
    if any(k in env_settings for k in raw_keys):
        return "env var"
    if any(k in yaml_settings for k in raw_keys):
        return "yaml"
    return "default"


def config(
    config_path: str | Path | None = None,
) -> ConfigResult:
    """Get current configuration settings.

    Args:
        config_path: Override config file path

    Returns:
        ConfigResult with all settings and their sources
    """
    found_config_path = Path(config_path) if config_path is not None else find_config_file()

    settings = get_settings(found_config_path)
    if isinstance(settings, ConfigError):
        return ConfigResult(success=False, error=settings.message)

    cli_config = load_config(found_config_path)
    env_settings = get_settings_from_env()
    yaml_settings = get_settings_from_yaml(cli_config)

    result = ConfigResult(success=True)
    result.config_path = str(found_config_path) if found_config_path else None
    result.warnings = validate_config(cli_config, found_config_path)

    for name, value in settings.model_dump().items():
        result.settings.append(
            SettingInfo(
                name=name,
                value=str(value),
                source=_get_setting_source(name, yaml_settings, env_settings),
            )
        )

    return result
