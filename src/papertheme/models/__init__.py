# src/papertheme/models/__init__.py
"""Data models for papertheme."""

from papertheme.models.theme import Brightness, ColorToken, CssVariable, ThemeVariant

__all__ = ["Brightness", "ColorToken", "CssVariable", "ThemeVariant"]
