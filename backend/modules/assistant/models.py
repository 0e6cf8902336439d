"""
Assistant module data models.

TaskAssistance mirrors the JSON object the model is asked to return, so
field aliases use the camelCase keys from the prompt.
"""

from typing import Any
from pydantic import BaseModel, ConfigDict, Field, field_validator


DIFFICULTIES = ("easy", "medium", "hard")

AI_RESPONSE_ERROR = "Error generating AI response"
STRUCTURED_RESPONSE_ERROR = "Error generating structured response"


class AssistanceResource(BaseModel):
    """A link suggested for one step."""

    title: str
    url: str = ""
    type: str = Field(default="article", description="article | video | tool | book")


class AssistanceStep(BaseModel):
    """One actionable step."""

    step: str
    details: str = ""
    resources: list[AssistanceResource] = Field(default_factory=list)


class TaskAssistance(BaseModel):
    """Structured guidance for completing a task."""

    model_config = ConfigDict(populate_by_name=True)

    summary: str
    steps: list[AssistanceStep] = Field(default_factory=list)
    estimated_time: str = Field(default="Unknown", alias="estimatedTime")
    difficulty: str = Field(default="medium", description="easy | medium | hard")
    related_tasks: list[str] = Field(default_factory=list, alias="relatedTasks")

    @field_validator("difficulty", mode="before")
    @classmethod
    def normalize_difficulty(cls, value: Any) -> str:
        if isinstance(value, str) and value.strip().lower() in DIFFICULTIES:
            return value.strip().lower()
        return "medium"

    @classmethod
    def placeholder(cls, summary: str) -> "TaskAssistance":
        """Empty assistance carrying an error summary."""
        return cls(
            summary=summary,
            steps=[],
            estimated_time="Unknown",
            difficulty="medium",
            related_tasks=[],
        )


class SuggestRequest(BaseModel):
    """Ad-hoc assistance request for a task that may not be saved yet."""

    title: str = Field(..., min_length=1, max_length=500)
    description: str = Field(default="", max_length=10000)

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Title cannot be blank")
        return value
