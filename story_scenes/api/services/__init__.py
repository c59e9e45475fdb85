"""Services for story generation and its upstream collaborators."""

from .image_search import ImageSearcher
from .story_service import StoryService
from .text_generation import TextGenerator

__all__ = ["ImageSearcher", "StoryService", "TextGenerator"]
