# src/papertheme/settings.py
"""Generation settings for papertheme.

Settings are passed programmatically. The library itself does not read
environment variables or config files; papertheme.config does that for
the CLI and for applications that want file/env based configuration.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from papertheme.colors import normalize_hex, seed_from_hue
from papertheme.css import GENERATOR_NAME

# Hue (fraction of the color wheel) the default seed is derived from
DEFAULT_HUE = 0.4

# Named contrast levels
CONTRAST_PRESETS: dict[str, float] = {
    "reduced": -0.5,
    "standard": 0.0,
    "medium": 0.5,
    "high": 1.0,
}


class Settings(BaseModel):
    """Theme generation settings.

    Example:
        settings = Settings(seed_color="#1976D2", contrast=0.5)

        # Or start from a named contrast level
        settings = Settings.with_preset("high", seed_color="#E91E63")
    """

    seed_color: str = Field(default_factory=lambda: seed_from_hue(DEFAULT_HUE))
    contrast: float = Field(default=0.0, ge=-1.0, le=1.0)

    # Output
    generator: str = GENERATOR_NAME
    output: str = "theme.css"
    selector: str = ":root"  # Rule selector for preview output

    @field_validator("seed_color")
    @classmethod
    def _check_seed_color(cls, value: str) -> str:
        # Raises InvalidColorError (a ValueError), reported by pydantic as a validation error
        return normalize_hex(value)

    @classmethod
    def from_hue(cls, hue: float, **overrides: Any) -> Settings:
        """Create Settings whose seed is the fully saturated color at ``hue`` (0.0-1.0)."""
        return cls(seed_color=seed_from_hue(hue), **overrides)

    @classmethod
    def with_preset(cls, preset: str, **overrides: Any) -> Settings:
        """Create Settings with a named contrast preset.

        Args:
            preset: One of CONTRAST_PRESETS ("reduced", "standard", "medium", "high").
            **overrides: Additional settings; an explicit ``contrast`` wins over the preset.

        Returns:
            Settings instance with the preset applied.
        """
        if preset not in CONTRAST_PRESETS:
            raise ValueError(
                f"Unknown contrast preset '{preset}'. "
                f"Available presets: {list(CONTRAST_PRESETS.keys())}"
            )

        preset_settings: dict[str, Any] = {"contrast": CONTRAST_PRESETS[preset]}
        preset_settings.update(overrides)
        return cls(**preset_settings)
