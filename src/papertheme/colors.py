# src/papertheme/colors.py
"""Hex color helpers.

Conversions between ``#rrggbb`` strings and the ARGB integers used by
``materialyoucolor``, plus the small HSL and contrast helpers the CLI uses
to pick seeds and swatch text colors.
"""

from __future__ import annotations

import math
import re

from materialyoucolor.utils.color_utils import (
    argb_from_rgb,
    blue_from_argb,
    green_from_argb,
    red_from_argb,
)

from papertheme.exceptions import InvalidColorError

_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")

# Weighted-luminance threshold below which light text reads better.
DARK_BACKGROUND_THRESHOLD = 112


def is_hex_color(value: object) -> bool:
    """True for ``#rgb`` or ``#rrggbb`` strings (any case)."""
    return isinstance(value, str) and _HEX_COLOR.match(value) is not None


def normalize_hex(value: str) -> str:
    """Return ``value`` as lowercase ``#rrggbb``.

    Raises:
        InvalidColorError: If value is not ``#rgb`` or ``#rrggbb``.
    """
    if not is_hex_color(value):
        raise InvalidColorError(value)
    digits = value[1:].lower()
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    return f"#{digits}"


def argb_from_hex(value: str) -> int:
    """Parse a hex color into an opaque ARGB integer."""
    digits = normalize_hex(value)[1:]
    return argb_from_rgb(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def hex_from_argb(argb: int) -> str:
    """Format an ARGB integer as lowercase ``#rrggbb`` (alpha dropped)."""
    return f"#{red_from_argb(argb):02x}{green_from_argb(argb):02x}{blue_from_argb(argb):02x}"


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def hsl_to_hex(h: float, s: float = 100, l: float = 50) -> str:  # noqa: E741
    """Convert HSL to a lowercase ``#rrggbb`` string.

    Args:
        h: Hue in degrees (0-360).
        s: Saturation percentage (0-100).
        l: Lightness percentage (0-100).

    Examples:
        >>> hsl_to_hex(0)
        '#ff0000'
        >>> hsl_to_hex(240)
        '#0000ff'
    """
    lightness = l / 100
    a = s * min(lightness, 1 - lightness) / 100

    def channel(n: int) -> str:
        k = (n + h / 30) % 12
        color = lightness - a * max(min(k - 3, 9 - k, 1), -1)
        return f"{_round_half_up(255 * color):02x}"

    return f"#{channel(0)}{channel(8)}{channel(4)}"


def seed_from_hue(hue: float) -> str:
    """Seed color for a hue given as a fraction of the color wheel (0.0-1.0)."""
    return hsl_to_hex(_round_half_up(hue * 360))


def is_dark_background(value: str) -> bool:
    """True if light text should be used on top of ``value``.

    Uses a weighted RGB sum that favors green and discounts blue.
    """
    digits = normalize_hex(value)[1:]
    r, g, b = (int(digits[i : i + 2], 16) for i in (0, 2, 4))
    return (r * 1.1 + g * 1.3 + b / 1.5) / 3 < DARK_BACKGROUND_THRESHOLD
