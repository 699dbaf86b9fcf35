"""papertheme - Material Design 3 themes for Tailwind CSS.

Generates a light/dark pair of Material Design 3 color schemes from a single
seed color and writes them as CSS custom properties in a Tailwind CSS
``@theme`` block.

Quick Start:
    from papertheme import generate_scheme, generate_theme_css

    scheme = generate_scheme("#1976D2", 0.0)
    css = generate_theme_css(scheme, "#1976D2", 0.0)

Live preview:
    from papertheme import InlineStyle, apply_color_scheme

    style = InlineStyle()
    apply_color_scheme(scheme, style)
    print(style.to_css(":root"))

Custom engine:
    from papertheme import ColorEngine, generate_scheme

    scheme = generate_scheme("#1976D2", 0.0, engine=MyColorEngine())
"""

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("papertheme")
except PackageNotFoundError:
    # Development / source-tree fallback (e.g. running tests without installing the wheel).
    try:
        import tomllib
        from pathlib import Path

        def _read_version_from_pyproject() -> str | None:
            for parent in Path(__file__).resolve().parents:
                pyproject = parent / "pyproject.toml"
                if pyproject.exists():
                    data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
                    version = data.get("project", {}).get("version")
                    return str(version) if version is not None else None
            return None

        __version__ = _read_version_from_pyproject() or "unknown"
    except (OSError, ValueError):
        __version__ = "unknown"

# Color helpers
from papertheme.colors import hsl_to_hex, is_dark_background, normalize_hex

# CSS output
from papertheme.css import GENERATOR_NAME, convert_to_variables, generate_theme_css

# Engines
from papertheme.engine import ColorEngine, MaterialColorEngine, TokenSource
from papertheme.exceptions import InvalidColorError

# Models
from papertheme.models import Brightness, ColorToken, CssVariable, ThemeVariant
from papertheme.naming import css_variable_name, to_kebab_case

# Generation
from papertheme.scheme import TOKEN_ROLES, generate_scheme

# Configuration
from papertheme.settings import Settings

# Live application
from papertheme.style import InlineStyle, StyleContext, apply_color_scheme, root_style

__all__ = [
    # Version
    "__version__",
    # Models
    "Brightness",
    "ColorToken",
    "CssVariable",
    "ThemeVariant",
    # Engines
    "ColorEngine",
    "TokenSource",
    "MaterialColorEngine",
    # Generation
    "TOKEN_ROLES",
    "generate_scheme",
    # Naming
    "to_kebab_case",
    "css_variable_name",
    # CSS output
    "GENERATOR_NAME",
    "convert_to_variables",
    "generate_theme_css",
    # Live application
    "StyleContext",
    "InlineStyle",
    "apply_color_scheme",
    "root_style",
    # Colors
    "hsl_to_hex",
    "is_dark_background",
    "normalize_hex",
    "InvalidColorError",
    # Configuration
    "Settings",
]
