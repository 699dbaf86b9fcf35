# tests/test_config.py
"""Tests for config file and environment loading."""

import logging
from pathlib import Path

import pytest

from papertheme.config import (
    ConfigError,
    build_settings,
    find_config_file,
    get_settings,
    get_settings_from_env,
    get_settings_from_yaml,
    load_config,
    validate_config,
)
from papertheme.settings import Settings


def write_config(directory: Path, text: str, name: str = "papertheme.yaml") -> Path:
    path = directory / name
    path.write_text(text, encoding="utf-8")
    return path


class TestFindConfigFile:
    def test_none_when_missing(self, tmp_path):
        assert find_config_file(tmp_path) is None

    def test_finds_in_start_dir(self, tmp_path):
        path = write_config(tmp_path, "settings: {}\n")
        assert find_config_file(tmp_path) == path

    def test_finds_in_parent(self, tmp_path):
        path = write_config(tmp_path, "settings: {}\n", name=".papertheme")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)

        assert find_config_file(nested) == path

    def test_prefers_yaml_over_dotfile(self, tmp_path):
        write_config(tmp_path, "", name=".papertheme")
        path = write_config(tmp_path, "")

        assert find_config_file(tmp_path) == path


class TestValidateConfig:
    def test_valid_config(self):
        config = {"output": "theme.css", "settings": {"seed": "#fff", "contrast": 0.5}}
        assert validate_config(config) == []

    def test_unknown_keys(self):
        config = {"colours": 1, "settings": {"seed_colour": "#fff"}}

        warnings = validate_config(config, Path("papertheme.yaml"))

        assert warnings == [
            "Unknown config keys in papertheme.yaml: colours",
            "Unknown settings keys: seed_colour",
        ]


class TestLoadConfig:
    @pytest.fixture(autouse=True)
    def _require_yaml(self):
        pytest.importorskip("yaml")

    def test_no_config(self):
        assert load_config() == {}

    def test_explicit_path(self, tmp_path):
        path = write_config(tmp_path, "settings:\n  seed_color: '#1976D2'\n", name="custom.yaml")

        assert load_config(path) == {"settings": {"seed_color": "#1976D2"}}

    def test_searches_cwd(self, tmp_path):
        write_config(tmp_path, "output: out.css\n")

        assert load_config() == {"output": "out.css"}

    def test_empty_file(self, tmp_path):
        path = write_config(tmp_path, "")
        assert load_config(path) == {}

    def test_missing_explicit_path(self, tmp_path):
        with pytest.raises(OSError):
            load_config(tmp_path / "nope.yaml")

    def test_settings_list_rejected(self, tmp_path):
        path = write_config(tmp_path, "settings:\n  - seed\n")

        with pytest.raises(ValueError, match="must be a mapping"):
            load_config(path)

    def test_null_settings_allowed(self, tmp_path):
        path = write_config(tmp_path, "settings:\n")

        assert load_config(path) == {"settings": None}

    def test_logs_unknown_keys(self, tmp_path, caplog):
        path = write_config(tmp_path, "bogus: 1\n")

        with caplog.at_level(logging.WARNING, logger="papertheme.config"):
            load_config(path)

        assert "Unknown config keys" in caplog.text


class TestGetSettingsFromEnv:
    def test_empty(self):
        assert get_settings_from_env() == {}

    def test_reads_variables(self, monkeypatch):
        monkeypatch.setenv("PAPERTHEME_SEED_COLOR", "#1976D2")
        monkeypatch.setenv("PAPERTHEME_HUE", "0.6")
        monkeypatch.setenv("PAPERTHEME_CONTRAST", "0.5")
        monkeypatch.setenv("PAPERTHEME_CONTRAST_PRESET", "high")
        monkeypatch.setenv("PAPERTHEME_GENERATOR", "Acme")
        monkeypatch.setenv("PAPERTHEME_OUTPUT", "build/theme.css")

        assert get_settings_from_env() == {
            "seed_color": "#1976D2",
            "hue": 0.6,
            "contrast": 0.5,
            "contrast_preset": "high",
            "generator": "Acme",
            "output": "build/theme.css",
        }

    def test_ignores_invalid_numbers(self, monkeypatch):
        monkeypatch.setenv("PAPERTHEME_CONTRAST", "loud")
        monkeypatch.setenv("PAPERTHEME_HUE", "")

        assert get_settings_from_env() == {}


class TestGetSettingsFromYaml:
    def test_settings_section(self):
        config = {"settings": {"seed": "#1976D2", "contrast": 0.5, "selector": ".app"}}

        assert get_settings_from_yaml(config) == {
            "seed_color": "#1976D2",
            "contrast": 0.5,
            "selector": ".app",
        }

    def test_root_output(self):
        assert get_settings_from_yaml({"output": "src/theme.css"}) == {"output": "src/theme.css"}

    def test_settings_output_wins(self):
        config = {"output": "a.css", "settings": {"output": "b.css"}}
        assert get_settings_from_yaml(config) == {"output": "b.css"}

    def test_null_settings(self):
        assert get_settings_from_yaml({"settings": None}) == {}


class TestBuildSettings:
    def test_defaults(self):
        settings = build_settings({}, {})

        assert settings.seed_color == "#00ff66"
        assert settings.contrast == 0.0

    def test_yaml(self):
        config = {"settings": {"seed_color": "#1976D2", "contrast": 0.5}}

        settings = build_settings(config, {})

        assert settings.seed_color == "#1976d2"
        assert settings.contrast == 0.5

    def test_env_beats_yaml(self):
        config = {"settings": {"seed_color": "#1976D2", "contrast": 0.5}}

        settings = build_settings(config, {"contrast": -0.5})

        assert settings.seed_color == "#1976d2"
        assert settings.contrast == -0.5

    def test_overrides_beat_env(self):
        settings = build_settings(
            {}, {"seed_color": "#1976D2"}, overrides={"seed_color": "#FF5722"}
        )
        assert settings.seed_color == "#ff5722"

    def test_none_overrides_ignored(self):
        settings = build_settings({}, {"contrast": 1.0}, overrides={"contrast": None})
        assert settings.contrast == 1.0

    def test_reads_env_when_not_given(self, monkeypatch):
        monkeypatch.setenv("PAPERTHEME_CONTRAST", "0.25")
        assert build_settings({}).contrast == 0.25

    def test_hue(self):
        assert build_settings({}, {"hue": 0.0}).seed_color == "#ff0000"

    def test_seed_beats_hue_in_same_source(self):
        settings = build_settings({"settings": {"seed_color": "#1976D2", "hue": 0.0}}, {})
        assert settings.seed_color == "#1976d2"

    def test_higher_hue_replaces_lower_seed(self):
        settings = build_settings({"settings": {"seed_color": "#1976D2"}}, {"hue": 0.0})
        assert settings.seed_color == "#ff0000"

    def test_higher_seed_replaces_lower_hue(self):
        settings = build_settings({}, {"hue": 0.0}, overrides={"seed_color": "#1976D2"})
        assert settings.seed_color == "#1976d2"

    def test_preset(self):
        assert build_settings({}, {"contrast_preset": "medium"}).contrast == 0.5

    def test_contrast_beats_preset_in_same_source(self):
        config = {"settings": {"contrast": 0.25, "contrast_preset": "high"}}
        assert build_settings(config, {}).contrast == 0.25

    def test_higher_preset_replaces_lower_contrast(self):
        settings = build_settings({"settings": {"contrast": 0.25}}, {"contrast_preset": "reduced"})
        assert settings.contrast == -0.5

    def test_unknown_preset(self):
        with pytest.raises(ValueError, match="Unknown contrast preset"):
            build_settings({}, {"contrast_preset": "extreme"})

    def test_invalid_seed(self):
        with pytest.raises(ValueError):
            build_settings({}, {"seed_color": "blue"})


class TestGetSettings:
    def test_defaults(self):
        settings = get_settings()

        assert isinstance(settings, Settings)
        assert settings.seed_color == "#00ff66"

    def test_overrides(self):
        settings = get_settings(overrides={"seed_color": "#1976D2", "contrast_preset": "high"})

        assert settings.seed_color == "#1976d2"
        assert settings.contrast == 1.0

    def test_missing_file(self, tmp_path):
        pytest.importorskip("yaml")
        error = get_settings(tmp_path / "missing.yaml")

        assert isinstance(error, ConfigError)
        assert error.message.startswith("Cannot read config file")
        assert error.suggestion

    def test_invalid_yaml(self, tmp_path):
        pytest.importorskip("yaml")
        path = write_config(tmp_path, "settings: [unclosed\n")

        error = get_settings(path)

        assert isinstance(error, ConfigError)
        assert error.message.startswith("Invalid YAML")

    def test_not_a_mapping(self, tmp_path):
        pytest.importorskip("yaml")
        path = write_config(tmp_path, "- one\n- two\n")

        error = get_settings(path)

        assert isinstance(error, ConfigError)
        assert "must contain a mapping" in error.message

    def test_settings_section_not_a_mapping(self, tmp_path):
        pytest.importorskip("yaml")
        path = write_config(tmp_path, "settings:\n  - seed\n")

        error = get_settings(path)

        assert isinstance(error, ConfigError)
        assert "'settings'" in error.message
        assert "must be a mapping" in error.message

    def test_invalid_seed(self):
        error = get_settings(overrides={"seed_color": "blue"})

        assert isinstance(error, ConfigError)
        assert error.message.startswith("Invalid settings: seed_color:")
        assert "Invalid hex color" in error.message

    def test_out_of_range_contrast(self):
        error = get_settings(overrides={"contrast": 3.0})

        assert isinstance(error, ConfigError)
        assert "contrast" in error.message

    def test_unknown_preset(self):
        error = get_settings(overrides={"contrast_preset": "extreme"})

        assert isinstance(error, ConfigError)
        assert "Unknown contrast preset" in error.message
