# src/papertheme/engine/base.py
"""Abstract base classes for perceptual color engines."""

from abc import ABC, abstractmethod
from typing import Any

from papertheme.models import Brightness


class TokenSource(ABC):
    """A fully realized scheme that can be read one role at a time.

    Example:
        class MyTokenSource(TokenSource):
            def token(self, role):
                return my_scheme.lookup(role)
    """

    @abstractmethod
    def token(self, role: str) -> str:
        """Return the ``#rrggbb`` value of a named role (e.g. "onPrimary")."""
        ...


class ColorEngine(ABC):
    """Abstract base class for the color engine behind scheme generation.

    The engine owns all color science. Callers convert the seed once with
    seed_to_color, then build one TokenSource per brightness.

    Example:
        class MyColorEngine(ColorEngine):
            def seed_to_color(self, seed_hex):
                return my_lib.parse(seed_hex)

            def construct_scheme(self, color, brightness, contrast):
                return MyTokenSource(my_lib.scheme(color, brightness == "dark", contrast))
    """

    @abstractmethod
    def seed_to_color(self, seed_hex: str) -> Any:
        """Convert a hex seed color into the engine's internal color value."""
        ...

    @abstractmethod
    def construct_scheme(self, color: Any, brightness: Brightness, contrast: float) -> TokenSource:
        """Build the scheme for one brightness variant.

        Args:
            color: Value returned by seed_to_color.
            brightness: "light" or "dark".
            contrast: Contrast level, typically -1.0 to 1.0 (0.0 is standard).
        """
        ...
