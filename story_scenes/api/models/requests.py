"""Pydantic models for API requests."""

from typing import Optional

from pydantic import BaseModel, Field


class StoryRequest(BaseModel):
    """Request body for generating a story.

    `query` is optional at the schema level so that a missing or blank
    topic gets the regular error body instead of a validation error.
    """

    zone: Optional[str] = Field(
        default=None,
        description="Cultural region the story is set in",
        examples=["coastal", "Rajasthani"],
    )
    query: Optional[str] = Field(
        default=None,
        description="Story topic",
        examples=["A tale of a lighthouse keeper"],
    )
    language: Optional[str] = Field(
        default=None,
        description="Language to write the story in",
        examples=["English", "Hindi"],
    )
