# src/papertheme/style.py
"""Live application of a scheme to a style context.

Design Note: StyleContext is a Protocol rather than an ABC so that any
object with a ``set_property(name, value)`` method works, including a
browser element's style proxy or a test double. InlineStyle is the
in-process implementation used for previews.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from papertheme.css import convert_to_variables
from papertheme.models import ThemeVariant

logger = logging.getLogger(__name__)


@runtime_checkable
class StyleContext(Protocol):
    """Anything that accepts custom property assignments."""

    def set_property(self, name: str, value: str) -> None:
        """Set a CSS property (e.g. ``--color-light-primary``) to ``value``."""
        ...


class InlineStyle:
    """Ordered, in-memory inline style declarations.

    Example:
        style = InlineStyle()
        style.set_property("--color-light-primary", "#415f91")
        style.to_css()
        # ':root {\\n  --color-light-primary: #415f91;\\n}\\n'
    """

    def __init__(self) -> None:
        self._properties: dict[str, str] = {}

    def set_property(self, name: str, value: str) -> None:
        self._properties[name] = value

    def get_property_value(self, name: str) -> str:
        """Return the property value, or an empty string if unset."""
        return self._properties.get(name, "")

    def remove_property(self, name: str) -> str:
        """Remove a property and return its old value ("" if it was unset)."""
        return self._properties.pop(name, "")

    def clear(self) -> None:
        self._properties.clear()

    def items(self) -> list[tuple[str, str]]:
        return list(self._properties.items())

    def __len__(self) -> int:
        return len(self._properties)

    def __contains__(self, name: object) -> bool:
        return name in self._properties

    def to_css(self, selector: str = ":root") -> str:
        """Render the declarations as a single CSS rule."""
        body = "".join(f"  {name}: {value};\n" for name, value in self._properties.items())
        return f"{selector} {{\n{body}}}\n"


_root_style = InlineStyle()


def root_style() -> InlineStyle:
    """The process-wide style context used when none is passed explicitly."""
    return _root_style


def apply_color_scheme(
    scheme: Sequence[ThemeVariant],
    style: StyleContext | None = None,
) -> None:
    """Set every scheme token as a custom property on a style context.

    Properties are set one at a time in flattened order, named
    ``--color-<brightness>-<token>``. An empty scheme sets nothing.

    Args:
        scheme: Variants from generate_scheme().
        style: Target context (default: root_style()).
    """
    target = style if style is not None else root_style()
    variables = convert_to_variables(scheme)
    for name, value in variables:
        target.set_property(name, value)
    logger.debug("Applied %d custom properties", len(variables))
