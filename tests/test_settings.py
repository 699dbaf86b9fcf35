# tests/test_settings.py
"""Tests for Settings."""

import pytest
from pydantic import ValidationError

from papertheme.settings import CONTRAST_PRESETS, DEFAULT_HUE, Settings


class TestSettingsDefaults:
    def test_default_values(self):
        settings = Settings()

        assert settings.seed_color == "#00ff66"
        assert settings.contrast == 0.0
        assert settings.generator == "Xuan Paper"
        assert settings.output == "theme.css"
        assert settings.selector == ":root"

    def test_default_hue(self):
        assert DEFAULT_HUE == 0.4


class TestSettingsValidation:
    def test_seed_color_is_normalized(self):
        assert Settings(seed_color="#1976D2").seed_color == "#1976d2"
        assert Settings(seed_color="#abc").seed_color == "#aabbcc"

    def test_invalid_seed_color(self):
        with pytest.raises(ValidationError, match="Invalid hex color"):
            Settings(seed_color="1976D2")

    @pytest.mark.parametrize("contrast", [-1.0, -0.5, 0.0, 0.5, 1.0])
    def test_contrast_in_range(self, contrast):
        assert Settings(contrast=contrast).contrast == contrast

    @pytest.mark.parametrize("contrast", [-1.5, 1.01, 2])
    def test_contrast_out_of_range(self, contrast):
        with pytest.raises(ValidationError):
            Settings(contrast=contrast)


class TestSettingsFromHue:
    def test_from_hue(self):
        assert Settings.from_hue(0.0).seed_color == "#ff0000"

    def test_from_hue_with_overrides(self):
        settings = Settings.from_hue(2 / 3, contrast=0.5)

        assert settings.seed_color == "#0000ff"
        assert settings.contrast == 0.5


class TestSettingsPresets:
    def test_preset_values(self):
        assert CONTRAST_PRESETS == {
            "reduced": -0.5,
            "standard": 0.0,
            "medium": 0.5,
            "high": 1.0,
        }

    @pytest.mark.parametrize(("preset", "expected"), list(CONTRAST_PRESETS.items()))
    def test_with_preset(self, preset, expected):
        assert Settings.with_preset(preset).contrast == expected

    def test_with_preset_overrides(self):
        settings = Settings.with_preset("high", seed_color="#E91E63")

        assert settings.contrast == 1.0
        assert settings.seed_color == "#e91e63"

    def test_explicit_contrast_wins(self):
        assert Settings.with_preset("high", contrast=0.25).contrast == 0.25

    def test_unknown_preset(self):
        with pytest.raises(ValueError, match="Unknown contrast preset 'extreme'"):
            Settings.with_preset("extreme")
