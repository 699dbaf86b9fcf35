# src/papertheme/commands/__init__.py
"""UI-agnostic command layer for papertheme.

Commands return data structures, allowing UIs to render results appropriately.

Usage:
    from papertheme.commands import generate, preview

    result = generate.generate(seed_color="#1976D2", contrast=0.5, output="theme.css")
    result = preview.preview(hue=0.6)
"""

from papertheme.commands import config_cmd, generate, preview
from papertheme.commands.base import (
    CommandResult,
    ConfigResult,
    GenerateResult,
    PreviewResult,
    SettingInfo,
)

__all__ = [
    # Base types
    "CommandResult",
    # Result types
    "GenerateResult",
    "PreviewResult",
    "ConfigResult",
    "SettingInfo",
    # Command modules
    "generate",
    "preview",
    "config_cmd",
]
