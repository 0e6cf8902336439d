"""
Task assistant service.

Asks the configured chat model for structured guidance on a task. Never
raises to callers: failures come back as placeholder assistance whose
summary says what went wrong.
"""

import logging
from typing import Optional

from langchain_core.exceptions import OutputParserException
from langchain_core.messages import HumanMessage, SystemMessage
from langchain_core.output_parsers import JsonOutputParser
from pydantic import ValidationError as PydanticValidationError

from shared.config import Settings, get_settings
from providers.base import LLMProvider
from providers.factory import get_providers, model_config_from_settings

from .models import AI_RESPONSE_ERROR, STRUCTURED_RESPONSE_ERROR, TaskAssistance
from .interfaces import IAssistantService
from .prompts import SYSTEM_PROMPT, build_user_prompt

logger = logging.getLogger(__name__)


def parse_assistance(content: str) -> TaskAssistance:
    """
    Parse model output into TaskAssistance.

    Markdown code fences around the JSON are tolerated.

    Raises:
        OutputParserException: If the content is not JSON
        pydantic.ValidationError: If the JSON does not match the schema
    """
    parser = JsonOutputParser(pydantic_object=TaskAssistance)
    parsed = parser.parse(content)
    return TaskAssistance.model_validate(parsed)


class AssistantService(IAssistantService):
    """Generates TaskAssistance with a LangChain chat model."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        providers: Optional[dict[str, LLMProvider]] = None,
    ):
        self._settings = settings or get_settings()
        self._providers = providers if providers is not None else get_providers()

    async def suggest(self, title: str, description: str = "") -> TaskAssistance:
        """Get structured guidance for a task."""
        messages = [
            SystemMessage(content=SYSTEM_PROMPT),
            HumanMessage(content=build_user_prompt(title, description)),
        ]

        try:
            config = model_config_from_settings(self._settings)
            provider = self._providers.get(config.provider_type)
            if provider is None:
                raise ValueError(f"No provider registered for '{config.provider_type}'")
            llm = provider.get_llm(config)
            response = await llm.ainvoke(messages)
        except Exception as e:
            logger.error(f"Error fetching AI assistance: {e}")
            return TaskAssistance.placeholder(AI_RESPONSE_ERROR)

        content = response.content if isinstance(response.content, str) else ""
        if not content.strip():
            logger.error("AI assistance response was empty")
            return TaskAssistance.placeholder(AI_RESPONSE_ERROR)

        try:
            return parse_assistance(content)
        except (OutputParserException, PydanticValidationError) as e:
            logger.warning(f"Could not parse AI assistance response: {e}")
            return TaskAssistance.placeholder(STRUCTURED_RESPONSE_ERROR)

