"""Tests for settings."""
import pytest

from app.core.config import Settings


def test_defaults() -> None:
    """Test default settings."""
    settings = Settings(_env_file=None)

    assert settings.api_prefix == ""
    assert settings.port == 8080
    assert not settings.is_production()


def test_environment_override(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test settings read from environment variables."""
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.setenv("PORT", "9000")

    settings = Settings(_env_file=None)

    assert settings.is_production()
    assert settings.port == 9000
