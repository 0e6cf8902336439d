"""Factory functions for creating LLM providers."""

from shared.config import Settings

from .azure_openai import AzureOpenAIProvider
from .base import LLMProvider, ModelConfig
from .openai import OpenAIProvider


def get_providers() -> dict[str, LLMProvider]:
    """Get instances of each provider type.

    Returns:
        Dictionary mapping provider type names to provider instances.
        Keys are: "azure_openai", "openai"
    """
    return {
        "azure_openai": AzureOpenAIProvider(),
        "openai": OpenAIProvider(),
    }


def model_config_from_settings(settings: Settings) -> ModelConfig:
    """Build the assistant's ModelConfig from application settings.

    Raises:
        ValueError: If assistant_provider is not a known provider type
    """
    provider_type = settings.assistant_provider.strip().lower()

    if provider_type == "azure_openai":
        return ModelConfig(
            provider_type=provider_type,
            model_id=settings.azure_openai_deployment,
            api_base=settings.azure_openai_endpoint,
            api_key=settings.azure_openai_api_key,
            api_version=settings.azure_openai_api_version,
        )
    if provider_type == "openai":
        return ModelConfig(
            provider_type=provider_type,
            model_id=settings.openai_model,
            api_key=settings.openai_api_key,
        )

    raise ValueError(
        f"Unknown assistant provider '{settings.assistant_provider}'. "
        "Expected 'azure_openai' or 'openai'."
    )
