"""
Unit tests for environment-driven settings.
"""
from travel_lens.config.settings import (
    Environment,
    GeocodingSettings,
    SecuritySettings,
    load_settings,
)


def test_geocoding_disabled_without_key(monkeypatch):
    monkeypatch.delenv("OPENCAGE_API_KEY", raising=False)
    assert GeocodingSettings(_env_file=None).enabled is False


def test_geocoding_enabled_from_environment(monkeypatch):
    monkeypatch.setenv("OPENCAGE_API_KEY", "oc-123")
    settings = GeocodingSettings(_env_file=None)
    assert settings.enabled is True
    assert settings.api_key == "oc-123"


def test_port_and_environment_from_environment(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("ENVIRONMENT", "Production")
    settings = load_settings("does-not-exist.env")
    assert settings.port == 8080
    assert settings.environment == Environment.PRODUCTION
    assert settings.is_production()


def test_defaults(monkeypatch):
    for name in ("PORT", "ENVIRONMENT", "AI_PROVIDER_BASE_URL"):
        monkeypatch.delenv(name, raising=False)
    settings = load_settings("does-not-exist.env")
    assert settings.port == 3000
    assert settings.environment == Environment.DEVELOPMENT
    assert settings.ai_provider.base_url == "https://api.openai.com/v1"


def test_cors_origins_accepts_comma_separated_string():
    settings = SecuritySettings(cors_origins="https://a.example, https://b.example,")
    assert settings.cors_origins == ["https://a.example", "https://b.example"]
