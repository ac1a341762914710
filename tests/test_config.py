import pytest
from pydantic import ValidationError

from awesome_pizza.core.config import EnvironmentMode, get_settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("SEED_DEMO_ORDERS", raising=False)
    monkeypatch.delenv("ENV_MODE", raising=False)
    settings = get_settings()
    assert settings.env_mode == EnvironmentMode.DEVELOPMENT
    assert settings.seed_demo_orders is True
    assert settings.id_generation_attempts == 5
    assert settings.cors_allow_origins_list == ["*"]


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("ENV_MODE", "PRODUCTION")
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", "http://a.example, http://b.example")
    settings = get_settings()
    assert settings.env_mode == EnvironmentMode.PRODUCTION
    assert settings.cors_allow_origins_list == ["http://a.example", "http://b.example"]


def test_invalid_env_mode(monkeypatch):
    monkeypatch.setenv("ENV_MODE", "qa")
    with pytest.raises(ValidationError):
        get_settings()


def test_attempts_must_be_positive(monkeypatch):
    monkeypatch.setenv("ID_GENERATION_ATTEMPTS", "0")
    with pytest.raises(ValidationError):
        get_settings()


def test_settings_are_cached():
    assert get_settings() is get_settings()
