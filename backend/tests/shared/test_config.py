"""Tests for shared/config.py."""

import pytest
from unittest.mock import patch
import os

from shared.config import Settings, get_settings


class TestSettings:
    def test_default_values(self):
        """Settings should have sensible defaults."""
        settings = Settings(_env_file=None)
        assert settings.app_name == "BlueTask API"
        assert settings.debug is False
        assert settings.port == 8000
        assert settings.host == "0.0.0.0"
        assert settings.app_version == "0.1.0"
        assert settings.log_level == "INFO"
        assert settings.assistant_provider == "azure_openai"
        assert settings.enable_realtime is True

    def test_loads_from_env(self):
        """Settings should load from environment variables."""
        with patch.dict(os.environ, {"DEBUG": "true", "PORT": "9000", "LOG_LEVEL": "debug"}):
            settings = Settings()
            assert settings.debug is True
            assert settings.port == 9000
            assert settings.log_level == "debug"

    def test_loads_assistant_config_from_env(self):
        """Settings should load assistant credentials from environment variables."""
        with patch.dict(os.environ, {
            "ASSISTANT_PROVIDER": "openai",
            "OPENAI_API_KEY": "test-openai-key",
            "AZURE_OPENAI_ENDPOINT": "https://test.openai.azure.com",
            "AZURE_OPENAI_DEPLOYMENT": "gpt-4o",
        }):
            settings = Settings()
            assert settings.assistant_provider == "openai"
            assert settings.openai_api_key == "test-openai-key"
            assert settings.azure_openai_endpoint == "https://test.openai.azure.com"
            assert settings.azure_openai_deployment == "gpt-4o"

    def test_loads_supabase_config_from_env(self):
        """Settings should load Supabase configuration from environment variables."""
        with patch.dict(os.environ, {
            "SUPABASE_URL": "https://test.supabase.co",
            "SUPABASE_SERVICE_ROLE_KEY": "test-service-key",
            "SUPABASE_JWT_SECRET": "test-jwt-secret",
        }):
            settings = Settings()
            assert settings.supabase_url == "https://test.supabase.co"
            assert settings.supabase_service_role_key == "test-service-key"
            assert settings.supabase_jwt_secret == "test-jwt-secret"

    def test_realtime_flag(self):
        with patch.dict(os.environ, {"ENABLE_REALTIME": "false"}):
            assert Settings().enable_realtime is False


class TestGetSettings:
    def test_get_settings_returns_settings_instance(self):
        """get_settings should return a Settings instance."""
        get_settings.cache_clear()
        settings = get_settings()
        assert isinstance(settings, Settings)

    def test_get_settings_caches(self):
        """get_settings should return cached instance."""
        get_settings.cache_clear()
        settings1 = get_settings()
        settings2 = get_settings()
        assert settings1 is settings2
