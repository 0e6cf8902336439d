"""Tests for provider factory functions."""

import pytest

from providers import get_providers, model_config_from_settings
from providers.azure_openai import AzureOpenAIProvider
from providers.openai import OpenAIProvider
from shared.config import Settings


class TestGetProviders:
    def test_registered_providers(self):
        providers = get_providers()

        assert set(providers) == {"azure_openai", "openai"}
        assert isinstance(providers["azure_openai"], AzureOpenAIProvider)
        assert isinstance(providers["openai"], OpenAIProvider)


class TestModelConfigFromSettings:
    """Tests for model_config_from_settings."""

    def test_azure_settings(self):
        settings = Settings(
            assistant_provider="azure_openai",
            azure_openai_endpoint="https://bluetask.openai.azure.com",
            azure_openai_api_key="azure-key",
            azure_openai_deployment="gpt-4o-deployment",
        )

        config = model_config_from_settings(settings)

        assert config.provider_type == "azure_openai"
        assert config.model_id == "gpt-4o-deployment"
        assert config.api_base == "https://bluetask.openai.azure.com"
        assert config.api_version == "2024-05-01-preview"
        assert config.temperature == 0.7
        assert config.max_tokens == 800
        assert config.top_p == 0.95

    def test_openai_settings(self):
        settings = Settings(assistant_provider=" OpenAI ", openai_api_key="sk-test")

        config = model_config_from_settings(settings)

        assert config.provider_type == "openai"
        assert config.model_id == "gpt-4o-mini"
        assert config.api_key == "sk-test"

    def test_unknown_provider(self):
        with pytest.raises(ValueError, match="Unknown assistant provider"):
            model_config_from_settings(Settings(assistant_provider="mistral"))
