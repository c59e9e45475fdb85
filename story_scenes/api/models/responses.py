"""Pydantic models for API responses."""

from typing import Optional

from pydantic import BaseModel

from ...core.types import Scene


class SceneResponse(BaseModel):
    """A single scene: one paragraph and its picture URL ("" if none)."""

    text: str
    image: str = ""

    @classmethod
    def from_scene(cls, scene: Scene) -> "SceneResponse":
        return cls(text=scene.text, image=scene.image)


class StoryResponse(BaseModel):
    """Either four scenes or an error message, never both.

    Serialized with exclude_none so the body carries only one of the keys.
    """

    scenes: Optional[list[SceneResponse]] = None
    error: Optional[str] = None

    @classmethod
    def from_scenes(cls, scenes: list[Scene]) -> "StoryResponse":
        return cls(scenes=[SceneResponse.from_scene(s) for s in scenes])

    @classmethod
    def from_error(cls, message: str) -> "StoryResponse":
        return cls(error=message)
