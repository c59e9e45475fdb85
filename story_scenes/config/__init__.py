"""
Configuration module for the Cultural Story Scenes service.

Re-exports the fixed upstream parameters and story constants.
"""

from .llm import GENERATION_CONSTANTS, build_system_prompt
from .story import STORY_CONSTANTS, ERROR_MESSAGES
from .image import IMAGE_SEARCH_CONSTANTS

__all__ = [
    # Generation
    "GENERATION_CONSTANTS",
    "build_system_prompt",
    # Story
    "STORY_CONSTANTS",
    "ERROR_MESSAGES",
    # Image search
    "IMAGE_SEARCH_CONSTANTS",
]
