"""Story service: generation, scene splitting and picture lookup."""

import time
import uuid
from typing import Optional

from ...config.story import ERROR_MESSAGES
from ...core.scenes import assemble_scenes, derive_image_query, split_scenes
from ...core.types import FailureReason
from ..logging import story_logger
from ..models.responses import StoryResponse
from .image_search import ImageSearcher
from .text_generation import TextGenerator


class StoryService:
    """Turns a topic into four illustrated scenes.

    Every outcome is a StoryResponse; nothing is raised to the caller.
    """

    def __init__(self, generator: TextGenerator, searcher: ImageSearcher):
        self.generator = generator
        self.searcher = searcher

    async def create_story(
        self,
        zone: Optional[str],
        query: Optional[str],
        language: Optional[str],
    ) -> StoryResponse:
        """
        Generate a story and pair its scenes with pictures.

        Args:
            zone: Cultural region the story is set in
            query: Story topic, sent to the model as-is
            language: Language to write the story in

        Returns:
            A response with four scenes, or one with an error message.
        """
        request_id = str(uuid.uuid4())

        if not query or not query.strip():
            story_logger.request_rejected(request_id, "story topic missing")
            return StoryResponse.from_error(ERROR_MESSAGES["empty_topic"])

        start_time = time.time()
        story_logger.request_received(request_id, zone, language, query)
        stage = "generation"

        try:
            generation = await self.generator.generate(zone, language, query)
            if not generation.ok:
                story_logger.request_failed(
                    request_id, stage, generation.failure.value, generation.error
                )
                if generation.failure is FailureReason.EMPTY_GENERATION:
                    return StoryResponse.from_error(ERROR_MESSAGES["empty_generation"])
                return StoryResponse.from_error(ERROR_MESSAGES["upstream"])
            story_logger.stage_completed(request_id, stage, time.time() - start_time)

            stage = "splitting"
            parts = split_scenes(generation.value)

            stage = "image_search"
            search = await self.searcher.search(derive_image_query(query))
            if not search.ok:
                story_logger.request_failed(
                    request_id, stage, search.failure.value, search.error
                )
                return StoryResponse.from_error(ERROR_MESSAGES["upstream"])
            story_logger.stage_completed(request_id, stage)

            stage = "assembly"
            scenes = assemble_scenes(parts, search.value)

        except Exception as e:
            story_logger.request_failed(request_id, stage, "unexpected_error", e)
            return StoryResponse.from_error(ERROR_MESSAGES["upstream"])

        story_logger.request_completed(request_id, time.time() - start_time)
        return StoryResponse.from_scenes(scenes)
