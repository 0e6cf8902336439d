"""Base classes and models for LLM providers."""

from abc import ABC, abstractmethod

from langchain_core.language_models.chat_models import BaseChatModel
from pydantic import BaseModel


class ModelConfig(BaseModel):
    """Configuration for the assistant's chat model.

    Attributes:
        provider_type: Provider key (e.g., "azure_openai", "openai")
        model_id: Model name, or the deployment name on Azure
        api_base: Endpoint URL (Azure resource endpoint; empty for OpenAI)
        api_key: API key
        api_version: Azure OpenAI API version
        temperature: Sampling temperature
        max_tokens: Completion token limit
        top_p: Nucleus sampling cutoff
    """

    model_config = {"frozen": True}

    provider_type: str
    model_id: str
    api_base: str = ""
    api_key: str = ""
    api_version: str = ""
    temperature: float = 0.7
    max_tokens: int = 800
    top_p: float = 0.95


class LLMProvider(ABC):
    """Abstract base class for LLM providers.

    Implementations are thin wrappers that build a LangChain chat model
    with provider-specific settings.
    """

    @abstractmethod
    def get_llm(self, config: ModelConfig) -> BaseChatModel:
        """Return a configured chat model for the given config.

        Raises:
            ValueError: If required credentials are missing
        """
        pass
