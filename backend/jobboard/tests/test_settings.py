"""Tests for core settings validation."""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from jobboard.core.config import Settings

PRODUCTION_ENV = {
    "ENVIRONMENT": "production",
    "SECRET_KEY": "3f1c0d9ab27e4c5f8e6d7b1a2c3d4e5f",
    "DATABASE_URL": "postgresql://board:s3cret@db:5432/jobboard",
    "CORS_ORIGINS": "https://jobs.example.com",
}


def _settings(**env) -> Settings:
    with patch.dict(os.environ, env):
        return Settings(_env_file=None)


class TestCORSOrigins:
    def test_comma_separated(self):
        settings = _settings(
            ENVIRONMENT="development",
            CORS_ORIGINS="http://localhost:3000, https://jobs.example.com ,",
        )
        assert settings.cors_origins == ["http://localhost:3000", "https://jobs.example.com"]

    def test_json_list(self):
        settings = _settings(ENVIRONMENT="development", CORS_ORIGINS='["https://jobs.example.com"]')
        assert settings.cors_origins == ["https://jobs.example.com"]

    def test_wildcard_allowed_in_development(self):
        assert _settings(ENVIRONMENT="development", CORS_ORIGINS="*").cors_origins == ["*"]

    def test_empty_allowed_in_development(self):
        assert _settings(ENVIRONMENT="development", CORS_ORIGINS="").cors_origins == []

    def test_origin_without_scheme_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            _settings(ENVIRONMENT="development", CORS_ORIGINS="jobs.example.com")
        assert "must start with http" in str(exc_info.value)

    def test_wildcard_rejected_in_production(self):
        with pytest.raises(ValidationError) as exc_info:
            _settings(**{**PRODUCTION_ENV, "CORS_ORIGINS": "*"})
        assert "wildcard" in str(exc_info.value).lower()

    def test_empty_rejected_in_production(self):
        with pytest.raises(ValidationError) as exc_info:
            _settings(**{**PRODUCTION_ENV, "CORS_ORIGINS": ""})
        assert "cors_origins must be configured" in str(exc_info.value).lower()


class TestProductionGuards:
    def test_valid_production_config(self):
        settings = _settings(**PRODUCTION_ENV)
        assert settings.environment == "production"
        assert settings.cors_origins == ["https://jobs.example.com"]

    def test_placeholder_secret_rejected(self):
        env = {**PRODUCTION_ENV, "SECRET_KEY": "change-me-please"}
        with pytest.raises(ValidationError) as exc_info:
            _settings(**env)
        assert "SECRET_KEY" in str(exc_info.value)

    def test_default_database_credentials_rejected(self):
        env = {**PRODUCTION_ENV, "DATABASE_URL": "postgresql://jobboard:jobboard@db:5432/jobboard"}
        with pytest.raises(ValidationError) as exc_info:
            _settings(**env)
        assert "database_url" in str(exc_info.value)

    def test_placeholders_tolerated_in_development(self):
        settings = _settings(ENVIRONMENT="development", SECRET_KEY="change-me")
        assert settings.secret_key == "change-me"


class TestSearchAndAlertSettings:
    def test_defaults(self):
        settings = _settings(ENVIRONMENT="development")
        assert settings.default_page_size == 12
        assert settings.max_page_size == 100
        assert settings.alert_secret is None
        assert settings.alert_lookback_days == 7
        assert settings.alert_max_jobs == 50
        assert settings.recommendation_pool_size == 50

    def test_overrides_from_environment(self):
        settings = _settings(
            ENVIRONMENT="development",
            DEFAULT_PAGE_SIZE="24",
            SEARCH_RATE_LIMIT="30/minute",
            ALERT_SECRET="cron-token",
        )
        assert settings.default_page_size == 24
        assert settings.search_rate_limit == "30/minute"
        assert settings.alert_secret == "cron-token"

    @pytest.mark.parametrize("name", ["DEFAULT_PAGE_SIZE", "MAX_PAGE_SIZE"])
    def test_page_size_must_be_positive(self, name):
        with pytest.raises(ValidationError):
            _settings(ENVIRONMENT="development", **{name: "0"})
