"""Unit tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from core.config import ForwardingSettings, InstagramSettings, ServerSettings, Settings


@pytest.mark.unit
class TestSettings:
    def test_loaded_from_environment(self, monkeypatch):
        monkeypatch.setenv("APP_SECRET", "s3cret")
        monkeypatch.setenv("VERIFY_TOKEN", "vt")
        monkeypatch.setenv("ACCESS_TOKEN", "at")
        monkeypatch.setenv("ZAPIER_WEBHOOK_URL", "https://hooks.example.com/x")
        monkeypatch.setenv("PORT", "8080")

        config = Settings()

        assert config.app_secret == "s3cret"
        assert config.verify_token == "vt"
        assert config.instagram.access_token == "at"
        assert config.forwarding.webhook_url == "https://hooks.example.com/x"
        assert config.server.port == 8080

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("PORT", raising=False)
        monkeypatch.delenv("INSTAGRAM_API_VERSION", raising=False)
        monkeypatch.delenv("INSTAGRAM_GRAPH_URL", raising=False)

        assert ServerSettings().port == 3000
        assert InstagramSettings(access_token="t").base_url == "https://graph.instagram.com"

    def test_versioned_base_url(self):
        instagram = InstagramSettings(
            access_token="t", graph_url="https://graph.instagram.com/", api_version="v23.0"
        )

        assert instagram.base_url == "https://graph.instagram.com/v23.0"

    @pytest.mark.parametrize("missing", ["APP_SECRET", "VERIFY_TOKEN"])
    def test_missing_secret_fails_fast(self, monkeypatch, missing):
        monkeypatch.delenv(missing, raising=False)

        with pytest.raises(ValueError, match=missing):
            Settings()

    def test_missing_access_token_fails_fast(self, monkeypatch):
        monkeypatch.delenv("ACCESS_TOKEN", raising=False)

        with pytest.raises(ValueError, match="ACCESS_TOKEN"):
            InstagramSettings()

    def test_missing_forwarding_url_fails_fast(self, monkeypatch):
        monkeypatch.delenv("ZAPIER_WEBHOOK_URL", raising=False)

        with pytest.raises(ValueError, match="ZAPIER_WEBHOOK_URL"):
            ForwardingSettings()

    def test_settings_are_immutable(self):
        config = Settings()

        with pytest.raises(ValidationError):
            config.app_secret = "changed"
