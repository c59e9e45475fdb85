"""Story text generation through Groq's OpenAI-compatible API."""

import logging
from typing import Optional

from openai import AsyncOpenAI

from ...config.llm import GENERATION_CONSTANTS, build_messages
from ...core.types import FailureReason, UpstreamResult

logger = logging.getLogger(__name__)


def extract_story_text(completion) -> Optional[str]:
    """Return the first choice's message content, or None if there is none."""
    choices = completion.choices
    if not choices:
        return None
    return choices[0].message.content


class TextGenerator:
    """Writes a four-scene story for a topic with a single completion call."""

    def __init__(self, api_key: str):
        self.api_key = api_key

    async def generate(
        self, zone: Optional[str], language: Optional[str], query: str
    ) -> UpstreamResult[str]:
        """Generate story text.

        Returns a failed result with EMPTY_GENERATION when the model answers
        with no text, and GENERATION_ERROR when the call itself fails.
        """
        try:
            async with AsyncOpenAI(
                api_key=self.api_key,
                base_url=GENERATION_CONSTANTS["base_url"],
                max_retries=GENERATION_CONSTANTS["max_retries"],
            ) as client:
                completion = await client.chat.completions.create(
                    model=GENERATION_CONSTANTS["model"],
                    messages=build_messages(zone, language, query),
                    max_tokens=GENERATION_CONSTANTS["max_tokens"],
                    temperature=GENERATION_CONSTANTS["temperature"],
                )
            story = extract_story_text(completion)
        except Exception as e:
            logger.error(f"Story generation call failed: {e}")
            return UpstreamResult.fail(FailureReason.GENERATION_ERROR, e)

        if not story:
            logger.warning("Generation returned no story text")
            return UpstreamResult.fail(FailureReason.EMPTY_GENERATION)

        logger.debug(f"Generated {len(story)} characters")
        return UpstreamResult.success(story)
