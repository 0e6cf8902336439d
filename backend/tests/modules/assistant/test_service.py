"""
Tests for the task assistant service.

The chat model is replaced with a mock whose ainvoke returns canned
AIMessages, so no provider is contacted.
"""

import json

import pytest
from unittest.mock import AsyncMock, MagicMock

from langchain_core.messages import AIMessage, HumanMessage, SystemMessage

from modules.assistant.models import AI_RESPONSE_ERROR, STRUCTURED_RESPONSE_ERROR
from modules.assistant.service import AssistantService, parse_assistance
from shared.config import Settings


VALID_RESPONSE = {
    "summary": "Renew the passport before booking travel.",
    "steps": [
        {
            "step": "Gather documents",
            "details": "Old passport and two photos",
            "resources": [
                {"title": "Renewal checklist", "url": "https://example.com/renew", "type": "article"}
            ],
        }
    ],
    "estimatedTime": "1 hour",
    "difficulty": "Easy",
    "relatedTasks": ["Book appointment"],
}


def make_service(content=None, error: Exception = None) -> tuple[AssistantService, MagicMock]:
    """AssistantService whose model returns `content` or raises `error`."""
    llm = MagicMock()
    if error is not None:
        llm.ainvoke = AsyncMock(side_effect=error)
    else:
        llm.ainvoke = AsyncMock(return_value=AIMessage(content=content))

    provider = MagicMock()
    provider.get_llm.return_value = llm

    settings = Settings(assistant_provider="openai", openai_api_key="sk-test")
    return AssistantService(settings=settings, providers={"openai": provider}), llm


class TestParseAssistance:
    """Tests for parse_assistance."""

    def test_plain_json(self):
        assistance = parse_assistance(json.dumps(VALID_RESPONSE))

        assert assistance.summary.startswith("Renew")
        assert assistance.estimated_time == "1 hour"
        assert assistance.difficulty == "easy"
        assert assistance.related_tasks == ["Book appointment"]
        assert assistance.steps[0].resources[0].title == "Renewal checklist"

    def test_fenced_json(self):
        """Markdown code fences are stripped."""
        content = f"```json\n{json.dumps(VALID_RESPONSE)}\n```"

        assistance = parse_assistance(content)

        assert assistance.summary.startswith("Renew")

    def test_unknown_difficulty_becomes_medium(self):
        assistance = parse_assistance(json.dumps({**VALID_RESPONSE, "difficulty": "brutal"}))
        assert assistance.difficulty == "medium"

    def test_missing_optional_fields_use_defaults(self):
        assistance = parse_assistance(json.dumps({"summary": "Just do it"}))

        assert assistance.steps == []
        assert assistance.estimated_time == "Unknown"
        assert assistance.related_tasks == []


class TestSuggest:
    """Tests for AssistantService.suggest."""

    @pytest.mark.asyncio
    async def test_success(self):
        service, llm = make_service(json.dumps(VALID_RESPONSE))

        assistance = await service.suggest("Renew passport", "Expires in June")

        assert assistance.summary == VALID_RESPONSE["summary"]
        messages = llm.ainvoke.call_args[0][0]
        assert isinstance(messages[0], SystemMessage)
        assert isinstance(messages[1], HumanMessage)
        assert "Task: Renew passport" in messages[1].content
        assert "Existing Description: Expires in June" in messages[1].content

    @pytest.mark.asyncio
    async def test_blank_description_not_sent(self):
        service, llm = make_service(json.dumps(VALID_RESPONSE))

        await service.suggest("Renew passport", "   ")

        assert "Existing Description" not in llm.ainvoke.call_args[0][0][1].content

    @pytest.mark.asyncio
    async def test_model_error_returns_placeholder(self):
        """Provider failures never reach the caller."""
        service, _ = make_service(error=RuntimeError("rate limited"))

        assistance = await service.suggest("Renew passport")

        assert assistance.summary == AI_RESPONSE_ERROR
        assert assistance.steps == []
        assert assistance.difficulty == "medium"

    @pytest.mark.asyncio
    async def test_empty_response_returns_placeholder(self):
        service, _ = make_service("")

        assistance = await service.suggest("Renew passport")

        assert assistance.summary == AI_RESPONSE_ERROR

    @pytest.mark.asyncio
    async def test_unparseable_response_returns_placeholder(self):
        service, _ = make_service("Sure! Here are some tips: start early.")

        assistance = await service.suggest("Renew passport")

        assert assistance.summary == STRUCTURED_RESPONSE_ERROR
        assert assistance.estimated_time == "Unknown"

    @pytest.mark.asyncio
    async def test_wrong_shape_returns_placeholder(self):
        service, _ = make_service(json.dumps({"steps": "none"}))

        assistance = await service.suggest("Renew passport")

        assert assistance.summary == STRUCTURED_RESPONSE_ERROR

    @pytest.mark.asyncio
    async def test_unconfigured_provider_returns_placeholder(self):
        """Missing credentials surface as the generic error summary."""
        settings = Settings(assistant_provider="openai", openai_api_key="")
        service = AssistantService(settings=settings)

        assistance = await service.suggest("Renew passport")

        assert assistance.summary == AI_RESPONSE_ERROR

    @pytest.mark.asyncio
    async def test_unknown_provider_returns_placeholder(self):
        service = AssistantService(settings=Settings(assistant_provider="nope"), providers={})

        assistance = await service.suggest("Renew passport")

        assert assistance.summary == AI_RESPONSE_ERROR
