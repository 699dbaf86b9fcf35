# src/papertheme/naming.py
"""Token name to CSS custom property name conversion."""

import re

from papertheme.models import Brightness

# An ASCII capital with something other than a hyphen before it.
_BOUNDARY = re.compile(r"(?<=[^-])([A-Z])")


def to_kebab_case(name: str) -> str:
    """Convert a camelCase or PascalCase identifier to kebab-case.

    A hyphen goes before every uppercase letter that follows a non-hyphen
    character, then the result is lowercased. A leading capital gets no
    hyphen, and kebab-case input comes back unchanged.

    Examples:
        >>> to_kebab_case("surfaceContainerHighest")
        'surface-container-highest'
        >>> to_kebab_case("OnPrimary")
        'on-primary'
    """
    return _BOUNDARY.sub(r"-\1", name).lower()


def css_variable_name(brightness: Brightness | str, name: str) -> str:
    """Build the custom property name for a token, e.g. ``--color-dark-on-primary``."""
    return f"--color-{brightness}-{to_kebab_case(name)}"
