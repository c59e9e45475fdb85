"""Scene picture lookup through Unsplash photo search."""

import logging
from typing import Any

import httpx

from ...config.image import IMAGE_SEARCH_CONSTANTS
from ...core.types import FailureReason, UpstreamResult

logger = logging.getLogger(__name__)


def extract_image_urls(data: Any) -> list[str]:
    """Collect each result's URL of the configured size, in order.

    A body without results gives an empty list. A result without a "urls"
    mapping raises, since the response is then malformed.
    """
    results = data.get("results") if isinstance(data, dict) else None
    if not results:
        return []
    size = IMAGE_SEARCH_CONSTANTS["url_size"]
    return [result["urls"].get(size) or "" for result in results]


class ImageSearcher:
    """Finds up to four photos for a search term."""

    def __init__(self, access_key: str):
        self.access_key = access_key

    async def search(self, query: str) -> UpstreamResult[list[str]]:
        """Search for photos matching `query`.

        Error statuses with a JSON body (Unsplash's {"errors": [...]}) give
        an empty list. Transport errors and malformed bodies give a failed
        result.
        """
        params = {
            "query": query,
            "per_page": IMAGE_SEARCH_CONSTANTS["per_page"],
            "client_id": self.access_key,
        }

        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(IMAGE_SEARCH_CONSTANTS["url"], params=params)

            if response.status_code != 200:
                logger.warning(f"Image search returned status {response.status_code}")

            images = extract_image_urls(response.json())
        except Exception as e:
            logger.error(f"Image search failed for '{query}': {e}")
            return UpstreamResult.fail(FailureReason.IMAGE_SEARCH_ERROR, e)

        logger.debug(f"Image search for '{query}' found {len(images)} images")
        return UpstreamResult.success(images)
