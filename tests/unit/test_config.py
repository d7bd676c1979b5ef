"""Tests for environment settings."""

from api.config import Settings


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("ALERT_LOOKBACK_DAYS", "14")
    monkeypatch.setenv("API_KEYS", "alpha, beta,")

    settings = Settings(_env_file=None)

    assert settings.alert_lookback_days == 14
    assert settings.api_key_list == ["alpha", "beta"]


def test_cors_origins_are_split(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test")

    assert Settings(_env_file=None).cors_origin_list == ["http://a.test", "http://b.test"]
