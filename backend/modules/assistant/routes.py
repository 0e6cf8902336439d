"""
Assistant API endpoints.
"""

from fastapi import APIRouter, Depends

from api.middleware.auth import get_current_user
from api.dependencies import get_assistant_service
from shared.models import AuthenticatedUser

from .interfaces import IAssistantService
from .models import SuggestRequest, TaskAssistance

router = APIRouter()


@router.post("/suggest", response_model=TaskAssistance, response_model_by_alias=True)
async def suggest(
    request: SuggestRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IAssistantService = Depends(get_assistant_service),
) -> TaskAssistance:
    """
    Get AI guidance for a task without saving it.

    Always returns 200. If the model is unavailable or its answer cannot be
    parsed, the summary explains the failure and the other fields are empty.
    """
    return await service.suggest(request.title, request.description)
