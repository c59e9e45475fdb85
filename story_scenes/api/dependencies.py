"""FastAPI dependency injection for settings and services."""

from typing import Annotated

from fastapi import Depends

from .config import Settings, get_settings
from .services.image_search import ImageSearcher
from .services.story_service import StoryService
from .services.text_generation import TextGenerator


def get_text_generator(
    settings: Annotated[Settings, Depends(get_settings)]
) -> TextGenerator:
    """Get a TextGenerator using the configured Groq key."""
    return TextGenerator(settings.groq_api_key)


def get_image_searcher(
    settings: Annotated[Settings, Depends(get_settings)]
) -> ImageSearcher:
    """Get an ImageSearcher using the configured Unsplash key."""
    return ImageSearcher(settings.unsplash_access_key)


# Service - depends on both upstream clients
def get_story_service(
    generator: Annotated[TextGenerator, Depends(get_text_generator)],
    searcher: Annotated[ImageSearcher, Depends(get_image_searcher)],
) -> StoryService:
    """Get a StoryService with injected upstream clients."""
    return StoryService(generator, searcher)


# Type aliases for cleaner route signatures
AppSettings = Annotated[Settings, Depends(get_settings)]
Service = Annotated[StoryService, Depends(get_story_service)]
