"""Pydantic models for API requests and responses."""

from .requests import StoryRequest
from .responses import SceneResponse, StoryResponse

__all__ = [
    "StoryRequest",
    "SceneResponse",
    "StoryResponse",
]
