"""Shared pytest fixtures."""

from datetime import UTC, datetime

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate tests from PAPERTHEME_* variables and config files in the cwd."""
    import os

    for key in list(os.environ):
        if key.startswith("PAPERTHEME_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def fixed_now():
    return datetime(2024, 1, 1, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def mock_engine():
    """Create a mock color engine for testing.

    Each token value is derived from the brightness and role, and every
    call is recorded so ordering and call counts can be asserted.
    """
    from papertheme.engine import ColorEngine, TokenSource

    class MockTokenSource(TokenSource):
        def __init__(self, brightness: str, overrides: dict[str, str]) -> None:
            self.brightness = brightness
            self.overrides = overrides

        def token(self, role: str) -> str:
            if role in self.overrides:
                return self.overrides[role]
            return "#ffffff" if self.brightness == "light" else "#000000"

    class MockColorEngine(ColorEngine):
        """Mock engine that returns fixed colors."""

        def __init__(self) -> None:
            self.seed_calls: list[str] = []
            self.scheme_calls: list[tuple[object, str, float]] = []
            self.overrides: dict[str, dict[str, str]] = {"light": {}, "dark": {}}

        def seed_to_color(self, seed_hex: str) -> object:
            self.seed_calls.append(seed_hex)
            return {"seed": seed_hex}

        def construct_scheme(self, color, brightness, contrast):
            self.scheme_calls.append((color, brightness, contrast))
            return MockTokenSource(brightness, self.overrides[brightness])

    return MockColorEngine()


@pytest.fixture
def sample_scheme():
    """A small two-variant scheme."""
    from papertheme.models import ThemeVariant

    return [
        ThemeVariant(
            brightness="light",
            colors=[
                ("primary", "#1976D2"),
                ("onPrimary", "#FFFFFF"),
                ("primaryContainer", "#BBDEFB"),
            ],
        ),
        ThemeVariant(
            brightness="dark",
            colors=[
                ("primary", "#90CAF9"),
                ("onPrimary", "#003258"),
            ],
        ),
    ]
