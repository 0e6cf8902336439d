"""LLM provider implementations."""

from .base import LLMProvider, ModelConfig
from .factory import get_providers, model_config_from_settings

__all__ = ["LLMProvider", "ModelConfig", "get_providers", "model_config_from_settings"]
