# src/papertheme/commands/preview.py
"""Preview command - generate a scheme and apply it to an inline style."""

from __future__ import annotations

from pathlib import Path

from papertheme.commands.base import PreviewResult
from papertheme.config import ConfigError, get_settings
from papertheme.engine import ColorEngine
from papertheme.scheme import generate_scheme
from papertheme.style import InlineStyle, apply_color_scheme


def preview(
    seed_color: str | None = None,
    hue: float | None = None,
    contrast: float | None = None,
    contrast_preset: str | None = None,
    config_path: str | Path | None = None,
    engine: ColorEngine | None = None,
) -> PreviewResult:
    """Generate a scheme without writing anything.

    Args:
        seed_color: Hex seed color
        hue: Seed hue as a fraction of the color wheel (ignored if seed_color is set)
        contrast: Contrast level (-1.0 to 1.0)
        contrast_preset: Named contrast level (ignored if contrast is set)
        config_path: Override config file path
        engine: Color engine (default: MaterialColorEngine)

    Returns:
        PreviewResult with both variants and the applied inline style
    """
    settings = get_settings(
        config_path,
        overrides={
            "seed_color": seed_color,
            "hue": hue,
            "contrast": contrast,
            "contrast_preset": contrast_preset,
        },
    )
    if isinstance(settings, ConfigError):
        return PreviewResult(success=False, error=settings.message)

    scheme = generate_scheme(settings.seed_color, settings.contrast, engine=engine)
    style = InlineStyle()
    apply_color_scheme(scheme, style)

    return PreviewResult(
        success=True,
        seed_color=settings.seed_color,
        contrast=settings.contrast,
        scheme=scheme,
        style_css=style.to_css(settings.selector),
    )
