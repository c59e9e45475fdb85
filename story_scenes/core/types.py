"""
Centralized domain types for the Cultural Story Scenes service.

Upstream calls report their outcome through UpstreamResult instead of
raising, so the handler can tell a generation failure from an image
search failure.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Scene:
    """One scene of a story: a paragraph and the picture shown with it."""

    text: str
    image: str = ""  # URL, or empty when no picture was found


class FailureReason(str, Enum):
    """Why an upstream call did not produce a usable value."""

    EMPTY_GENERATION = "empty_generation"
    GENERATION_ERROR = "generation_error"
    IMAGE_SEARCH_ERROR = "image_search_error"


@dataclass(frozen=True)
class UpstreamResult(Generic[T]):
    """Outcome of a single upstream call."""

    value: Optional[T] = None
    failure: Optional[FailureReason] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls, value: T) -> "UpstreamResult[T]":
        return cls(value=value)

    @classmethod
    def fail(
        cls, reason: FailureReason, error: Optional[Exception] = None
    ) -> "UpstreamResult[T]":
        return cls(failure=reason, error=error)
