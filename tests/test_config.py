"""Tests for settings validation and startup checks."""

import pytest
from unittest.mock import AsyncMock
from fastapi.testclient import TestClient

import api
from social.config import Settings


class TestValidateRequired:
    def test_missing_secret_is_rejected(self):
        settings = Settings(_env_file=None, JWT_SECRET=None)

        with pytest.raises(ValueError) as exc:
            settings.validate_required()

        assert "JWT_SECRET" in str(exc.value)

    def test_non_positive_session_lifetime_is_rejected(self):
        settings = Settings(_env_file=None, JWT_SECRET="s", SESSION_EXPIRE_DAYS=0)

        with pytest.raises(ValueError) as exc:
            settings.validate_required()

        assert "SESSION_EXPIRE_DAYS" in str(exc.value)

    def test_complete_settings_pass(self, test_settings):
        test_settings.validate_required()


class TestSettingsHelpers:
    def test_cors_origins_are_split(self):
        settings = Settings(_env_file=None, CORS_ORIGINS="http://a.test, http://b.test")
        assert settings.get_cors_origins() == ["http://a.test", "http://b.test"]

    @pytest.mark.parametrize("environment, production", [
        ("production", True),
        ("Production", True),
        ("development", False),
        ("staging", False),
    ])
    def test_is_production(self, environment, production):
        assert Settings(_env_file=None, ENVIRONMENT=environment).is_production() is production


def test_app_refuses_to_start_without_secret(monkeypatch):
    monkeypatch.setattr(api.settings, "JWT_SECRET", None)
    connect = AsyncMock()
    monkeypatch.setattr(api.main_db, "connect", connect)

    with pytest.raises(ValueError, match="JWT_SECRET"):
        with TestClient(api.app):
            pass

    connect.assert_not_called()
