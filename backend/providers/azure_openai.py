"""Azure OpenAI LLM provider implementation.

Handles chat deployments on an Azure OpenAI resource via the
langchain-openai package.
"""

from langchain_openai import AzureChatOpenAI

from .base import LLMProvider, ModelConfig


class AzureOpenAIProvider(LLMProvider):
    """Provider for Azure OpenAI deployments.

    The model is addressed by deployment name on the configured resource
    endpoint. Endpoint, key and deployment are all required.
    """

    def get_llm(self, config: ModelConfig) -> AzureChatOpenAI:
        """Return an AzureChatOpenAI client for the configured deployment.

        Raises:
            ValueError: If the endpoint, API key or deployment is missing
        """
        missing = [
            name
            for name, value in (
                ("AZURE_OPENAI_ENDPOINT", config.api_base),
                ("AZURE_OPENAI_API_KEY", config.api_key),
                ("AZURE_OPENAI_DEPLOYMENT", config.model_id),
            )
            if not value
        ]
        if missing:
            raise ValueError(
                f"Azure OpenAI is not configured. Missing: {', '.join(missing)}"
            )

        return AzureChatOpenAI(
            azure_endpoint=config.api_base,
            api_key=config.api_key,
            azure_deployment=config.model_id,
            api_version=config.api_version,
            temperature=config.temperature,
            max_tokens=config.max_tokens,
            top_p=config.top_p,
        )
