# src/papertheme/commands/base.py
"""Base types for the commands layer.

Commands never raise for expected failures (bad colors, unreadable config,
unwritable output). They return a result with ``success=False`` and an
error message, and the UI decides how to report it.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from papertheme.models import ThemeVariant


@dataclass
class CommandResult:
    """Base result type for commands."""

    success: bool
    error: str | None = None


@dataclass
class GenerateResult(CommandResult):
    """Result of the generate command.

    Attributes:
        css: The generated stylesheet text
        seed_color: Seed color actually used (normalized)
        contrast: Contrast level actually used
        output_path: File the CSS was written to (None if not written)
        variable_count: Number of per-token declarations emitted
    """

    css: str = ""
    seed_color: str = ""
    contrast: float = 0.0
    output_path: str | None = None
    variable_count: int = 0


@dataclass
class PreviewResult(CommandResult):
    """Result of the preview command.

    Attributes:
        seed_color: Seed color actually used (normalized)
        contrast: Contrast level actually used
        scheme: Generated light and dark variants
        style_css: Inline style rule with every custom property applied
    """

    seed_color: str = ""
    contrast: float = 0.0
    scheme: list[ThemeVariant] = field(default_factory=list)
    style_css: str = ""


@dataclass
class SettingInfo:
    """Information about a single setting."""

    name: str
    value: str
    source: str  # "option", "env var", "yaml", "default"


@dataclass
class ConfigResult(CommandResult):
    """Result of the config command.

    Attributes:
        settings: Effective settings with their sources
        config_path: Path to config file (if found)
        warnings: Problems found in the config file
    """

    settings: list[SettingInfo] = field(default_factory=list)
    config_path: str | None = None
    warnings: list[str] = field(default_factory=list)
