"""Story endpoint."""

from fastapi import APIRouter

from ..dependencies import Service
from ..models.requests import StoryRequest
from ..models.responses import StoryResponse

router = APIRouter()


@router.post(
    "/story",
    response_model=StoryResponse,
    response_model_exclude_none=True,
    summary="Generate an illustrated story",
    description=(
        "Write a four-scene story for a topic and pair each scene with a photo. "
        "Always answers 200; failures are reported in the `error` field."
    ),
)
async def create_story(request: StoryRequest, service: Service):
    """Generate four scenes for a topic."""
    return await service.create_story(
        zone=request.zone,
        query=request.query,
        language=request.language,
    )
