# src/papertheme/commands/generate.py
"""Generate command - build a theme stylesheet.

This module provides the generation logic that the CLI uses. It can also be
called directly from build scripts.
"""

from __future__ import annotations

import logging
from pathlib import Path

from papertheme.commands.base import GenerateResult
from papertheme.config import ConfigError, get_settings
from papertheme.css import convert_to_variables, generate_theme_css
from papertheme.engine import ColorEngine
from papertheme.scheme import generate_scheme

logger = logging.getLogger(__name__)


def generate(
    seed_color: str | None = None,
    hue: float | None = None,
    contrast: float | None = None,
    contrast_preset: str | None = None,
    output: str | Path | None = None,
    write: bool = True,
    config_path: str | Path | None = None,
    engine: ColorEngine | None = None,
) -> GenerateResult:
    """Generate a Tailwind CSS theme file.

    Explicit arguments override PAPERTHEME_* environment variables, which
    override the config file.

    Args:
        seed_color: Hex seed color
        hue: Seed hue as a fraction of the color wheel (ignored if seed_color is set)
        contrast: Contrast level (-1.0 to 1.0)
        contrast_preset: Named contrast level (ignored if contrast is set)
        output: Output file path (default: from settings)
        write: Write the CSS to the output file; False only returns it
        config_path: Override config file path
        engine: Color engine (default: MaterialColorEngine)

    Returns:
        GenerateResult with the CSS text and where it was written
    """
    settings = get_settings(
        config_path,
        overrides={
            "seed_color": seed_color,
            "hue": hue,
            "contrast": contrast,
            "contrast_preset": contrast_preset,
            "output": str(output) if output is not None else None,
        },
    )
    if isinstance(settings, ConfigError):
        return GenerateResult(success=False, error=settings.message)

    scheme = generate_scheme(settings.seed_color, settings.contrast, engine=engine)
    css = generate_theme_css(
        scheme,
        settings.seed_color,
        settings.contrast,
        generator=settings.generator,
    )

    result = GenerateResult(
        success=True,
        css=css,
        seed_color=settings.seed_color,
        contrast=settings.contrast,
        variable_count=len(convert_to_variables(scheme)),
    )

    if write:
        path = Path(settings.output)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(css, encoding="utf-8")
        except OSError as e:
            return GenerateResult(success=False, error=f"Cannot write {path}: {e}")
        logger.info("Wrote %s", path)
        result.output_path = str(path)

    return result
