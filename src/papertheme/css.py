# src/papertheme/css.py
"""Tailwind CSS ``@theme`` output for generated schemes."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import UTC, datetime
from decimal import ROUND_HALF_UP, Decimal

from papertheme.models import CssVariable, ThemeVariant
from papertheme.naming import css_variable_name

logger = logging.getLogger(__name__)

GENERATOR_NAME = "Xuan Paper"

# Link and form roles. These are static aliases, not derived from the seed.
# The dark form background intentionally points at a light-scheme variable.
SUPPLEMENTARY_DECLARATIONS: tuple[CssVariable, ...] = (
    ("--color-light-link", "var(--color-blue-700)"),
    ("--color-dark-link", "var(--color-blue-300)"),
    ("--color-light-form", "var(--color-light-surface-container-lowest)"),
    ("--color-light-on-form", "var(--color-dark-surface-container-lowest)"),
    ("--color-dark-form", "var(--color-light-on-surface)"),
    ("--color-dark-on-form", "var(--color-dark-on-surface)"),
)

_HEADER = """/**
 * Theme colors for Tailwind CSS / Material Design 3
 *
 * Generated by: {generator}
 * Generated at: {generated_at}
 * Seed color  : {seed_color}
 * Contrast    : {contrast}
 */
"""


def convert_to_variables(scheme: Sequence[ThemeVariant]) -> tuple[CssVariable, ...]:
    """Flatten theme variants into ordered ``(css name, value)`` pairs.

    Variants keep their order and tokens keep theirs within each variant.
    Names become ``--color-<brightness>-<kebab-case token>``.

    Example:
        >>> convert_to_variables([ThemeVariant(brightness="light", colors=[("onPrimary", "#fff")])])
        (('--color-light-on-primary', '#fff'),)
    """
    return tuple(
        (css_variable_name(variant.brightness, name), value)
        for variant in scheme
        for name, value in variant.colors
    )


def format_contrast(contrast: float | str) -> str:
    """Format a contrast level with exactly two decimals.

    Ties round away from zero, judged on the exact binary value, and the
    sign is kept, even when the value rounds to zero (-0.5 -> "-0.50",
    -0.001 -> "-0.00"). Only an exact zero, including -0.0, prints as "0.00".
    """
    value = float(contrast)
    quantized = Decimal(value).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    if value == 0:
        quantized = abs(quantized)
    return f"{quantized:.2f}"


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 in UTC with milliseconds and a ``Z`` suffix."""
    if moment.tzinfo is not None:
        moment = moment.astimezone(UTC)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


def _utcnow() -> datetime:
    return datetime.now(UTC)


def generate_theme_css(
    scheme: Sequence[ThemeVariant],
    seed_color: str,
    contrast: float,
    *,
    generated_at: datetime | None = None,
    generator: str = GENERATOR_NAME,
) -> str:
    """Render a scheme as a commented Tailwind CSS ``@theme`` block.

    Args:
        scheme: Variants from generate_scheme().
        seed_color: Seed color, echoed in the header.
        contrast: Contrast level, echoed in the header with two decimals.
        generated_at: Header timestamp (default: now, UTC).
        generator: Generator name shown in the header.

    Returns:
        CSS text: header comment, then one declaration per token followed by
        the supplementary link/form aliases.
    """
    variables = convert_to_variables(scheme)
    header = _HEADER.format(
        generator=generator,
        generated_at=format_timestamp(generated_at or _utcnow()),
        seed_color=seed_color,
        contrast=format_contrast(contrast),
    )
    declarations = "\n".join(f"  {name}: {value};" for name, value in variables)
    supplementary = "\n".join(f"  {name}: {value};" for name, value in SUPPLEMENTARY_DECLARATIONS)

    logger.debug("Emitting %d theme variables for seed %s", len(variables), seed_color)
    return f"{header}\n@theme {{\n{declarations}\n\n{supplementary}\n}}\n"
