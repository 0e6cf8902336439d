"""
Assistant module interface.
"""

from typing import Protocol, runtime_checkable

from .models import TaskAssistance


@runtime_checkable
class IAssistantService(Protocol):
    """Interface for AI task assistance."""

    async def suggest(self, title: str, description: str = "") -> TaskAssistance:
        """
        Get structured guidance for a task.

        Never raises. Missing credentials, request failures and
        unparseable output all return a placeholder TaskAssistance.
        """
        ...
