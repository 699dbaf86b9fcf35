# src/papertheme/scheme.py
"""Light/dark scheme generation from a seed color."""

from __future__ import annotations

import logging

from papertheme.engine import ColorEngine, MaterialColorEngine
from papertheme.models import Brightness, ThemeVariant

logger = logging.getLogger(__name__)

# Variants are always produced in this order.
BRIGHTNESSES: tuple[Brightness, ...] = ("light", "dark")

# Material Design 3 color roles, in emission order.
TOKEN_ROLES: tuple[str, ...] = (
    "primary",
    "surfaceTint",
    "onPrimary",
    "primaryContainer",
    "onPrimaryContainer",
    "secondary",
    "onSecondary",
    "secondaryContainer",
    "onSecondaryContainer",
    "tertiary",
    "onTertiary",
    "tertiaryContainer",
    "onTertiaryContainer",
    "error",
    "onError",
    "errorContainer",
    "onErrorContainer",
    "background",
    "onBackground",
    "surface",
    "onSurface",
    "surfaceVariant",
    "onSurfaceVariant",
    "outline",
    "outlineVariant",
    "shadow",
    "scrim",
    "inverseSurface",
    "inverseOnSurface",
    "inversePrimary",
    "primaryFixed",
    "onPrimaryFixed",
    "primaryFixedDim",
    "onPrimaryFixedVariant",
    "secondaryFixed",
    "onSecondaryFixed",
    "secondaryFixedDim",
    "onSecondaryFixedVariant",
    "tertiaryFixed",
    "onTertiaryFixed",
    "tertiaryFixedDim",
    "onTertiaryFixedVariant",
    "surfaceDim",
    "surfaceBright",
    "surfaceContainerLowest",
    "surfaceContainerLow",
    "surfaceContainer",
    "surfaceContainerHigh",
    "surfaceContainerHighest",
)


def generate_scheme(
    seed_color: str,
    contrast: float,
    engine: ColorEngine | None = None,
) -> list[ThemeVariant]:
    """Generate light and dark theme variants from a seed color.

    The seed is converted once, then the engine builds exactly one scheme
    per brightness. Every variant carries all TOKEN_ROLES in that order.

    Args:
        seed_color: Hex seed color, e.g. "#1976D2".
        contrast: Contrast level, typically -1.0 to 1.0 (0.0 is standard).
        engine: Color engine to use (default: MaterialColorEngine).

    Returns:
        [light variant, dark variant]

    Example:
        scheme = generate_scheme("#1976D2", 0.0)
        light, dark = scheme
        light.get("primary")
    """
    engine = engine or MaterialColorEngine()
    color = engine.seed_to_color(seed_color)
    logger.debug("Generating scheme for seed %s (contrast %s)", seed_color, contrast)

    variants = []
    for brightness in BRIGHTNESSES:
        source = engine.construct_scheme(color, brightness, contrast)
        colors = tuple((role, source.token(role)) for role in TOKEN_ROLES)
        variants.append(ThemeVariant(brightness=brightness, colors=colors))
    return variants
