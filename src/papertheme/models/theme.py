# src/papertheme/models/theme.py
"""Theme variant data model."""

from typing import Literal

from pydantic import BaseModel, ConfigDict

Brightness = Literal["light", "dark"]

# (token name, "#rrggbb"), e.g. ("primaryContainer", "#d6e3ff")
ColorToken = tuple[str, str]

# (css variable name, value), e.g. ("--color-light-primary-container", "#d6e3ff")
CssVariable = tuple[str, str]


class ThemeVariant(BaseModel):
    """One brightness variant of a generated color scheme.

    Token order is the color engine's emission order and is preserved
    everywhere downstream.
    """

    model_config = ConfigDict(frozen=True)

    brightness: Brightness
    colors: tuple[ColorToken, ...] = ()

    def token_names(self) -> list[str]:
        """Names of the tokens in emission order."""
        return [name for name, _ in self.colors]

    def get(self, name: str) -> str | None:
        """Return the value of a token by name, or None if absent."""
        for token_name, value in self.colors:
            if token_name == name:
                return value
        return None
