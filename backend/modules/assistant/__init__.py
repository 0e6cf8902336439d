"""
Assistant module.

Generates structured task guidance with an LLM.

Public API:
- IAssistantService: Interface for task assistance
- TaskAssistance: Structured guidance (summary, steps, estimate, difficulty)
"""

from .interfaces import IAssistantService
from .models import (
    TaskAssistance,
    AssistanceStep,
    AssistanceResource,
    SuggestRequest,
    AI_RESPONSE_ERROR,
    STRUCTURED_RESPONSE_ERROR,
)

__all__ = [
    # Interface
    "IAssistantService",
    # Models
    "TaskAssistance",
    "AssistanceStep",
    "AssistanceResource",
    "SuggestRequest",
    "AI_RESPONSE_ERROR",
    "STRUCTURED_RESPONSE_ERROR",
]
