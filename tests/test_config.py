"""Tests for settings loading."""

from finite.config import Settings


def test_defaults() -> None:
    settings = Settings(_env_file=None)

    assert settings.port == 3000
    assert settings.default_timezone == "UTC"


def test_environment_overrides(monkeypatch) -> None:
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("DEFAULT_TIMEZONE", "Europe/Berlin")

    settings = Settings(_env_file=None)

    assert settings.port == 8080
    assert settings.default_timezone == "Europe/Berlin"
