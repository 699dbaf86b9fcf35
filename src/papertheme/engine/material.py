# src/papertheme/engine/material.py
"""materialyoucolor-backed color engine."""

from materialyoucolor.dynamiccolor.dynamic_scheme import DynamicScheme
from materialyoucolor.dynamiccolor.material_dynamic_colors import MaterialDynamicColors
from materialyoucolor.dynamiccolor.variant import Variant
from materialyoucolor.hct import Hct
from materialyoucolor.palettes.tonal_palette import TonalPalette
from materialyoucolor.utils.math_utils import sanitize_degrees_double

from papertheme.colors import argb_from_hex, hex_from_argb
from papertheme.engine.base import ColorEngine, TokenSource
from papertheme.models import Brightness

# Tonal-spot palette chromas
PRIMARY_CHROMA = 36.0
SECONDARY_CHROMA = 16.0
TERTIARY_CHROMA = 24.0
TERTIARY_HUE_SHIFT = 60.0
NEUTRAL_CHROMA = 6.0
NEUTRAL_VARIANT_CHROMA = 8.0


class MaterialTokenSource(TokenSource):
    """Reads role colors out of a materialyoucolor DynamicScheme."""

    def __init__(self, scheme: DynamicScheme, colors: MaterialDynamicColors) -> None:
        self.scheme = scheme
        self._colors = colors

    def token(self, role: str) -> str:
        dynamic_color = getattr(self._colors, role, None)
        if dynamic_color is None:
            raise KeyError(f"Unknown color role: {role}")
        return hex_from_argb(dynamic_color.get_argb(self.scheme))


class MaterialColorEngine(ColorEngine):
    """Material Design 3 engine using ``materialyoucolor``.

    Builds tonal-spot palettes around the seed hue and evaluates them with
    the 2021 color spec.

    Example:
        engine = MaterialColorEngine()
        hct = engine.seed_to_color("#1976d2")
        light = engine.construct_scheme(hct, "light", 0.0)
        light.token("primary")
    """

    def __init__(self, spec_version: str = "2021") -> None:
        """Initialize the engine.

        Args:
            spec_version: materialyoucolor color spec ("2021" or "2025").
        """
        self.spec_version = spec_version
        self._colors = MaterialDynamicColors(spec=spec_version)

    def seed_to_color(self, seed_hex: str) -> Hct:
        return Hct.from_int(argb_from_hex(seed_hex))

    def construct_scheme(self, color: Hct, brightness: Brightness, contrast: float) -> TokenSource:
        hue = color.hue
        scheme = DynamicScheme(
            source_color_hct=color,
            variant=Variant.TONAL_SPOT,
            contrast_level=float(contrast),
            is_dark=brightness == "dark",
            spec_version=self.spec_version,
            primary_palette=TonalPalette.from_hue_and_chroma(hue, PRIMARY_CHROMA),
            secondary_palette=TonalPalette.from_hue_and_chroma(hue, SECONDARY_CHROMA),
            tertiary_palette=TonalPalette.from_hue_and_chroma(
                sanitize_degrees_double(hue + TERTIARY_HUE_SHIFT),
                TERTIARY_CHROMA,
            ),
            neutral_palette=TonalPalette.from_hue_and_chroma(hue, NEUTRAL_CHROMA),
            neutral_variant_palette=TonalPalette.from_hue_and_chroma(hue, NEUTRAL_VARIANT_CHROMA),
        )
        return MaterialTokenSource(scheme, self._colors)
