"""Pytest fixtures for API tests."""

import pytest
from unittest.mock import AsyncMock, MagicMock

from fastapi.testclient import TestClient

from story_scenes.api.config import Settings, get_settings
from story_scenes.api.dependencies import get_image_searcher, get_text_generator
from story_scenes.api.main import app
from story_scenes.api.services.image_search import ImageSearcher
from story_scenes.api.services.text_generation import TextGenerator
from story_scenes.core.types import UpstreamResult

PARAGRAPHS = [
    "The lighthouse keeper climbed the spiral stairs every evening before dusk.",
    "Fishermen in the harbour watched the lamp flicker to life above the rocks.",
    "One stormy night the lamp failed, and the keeper lit torches along the cliff.",
    "By morning every boat was home, and the village sang his name at the shore.",
]

STORY_TEXT = "\n\n".join(PARAGRAPHS)

IMAGE_URLS = [
    "https://images.unsplash.com/photo-1?w=1080",
    "https://images.unsplash.com/photo-2?w=1080",
    "https://images.unsplash.com/photo-3?w=1080",
    "https://images.unsplash.com/photo-4?w=1080",
]

TEST_SETTINGS = Settings(
    groq_api_key="test-groq-key",
    unsplash_access_key="test-unsplash-key",
    log_json=False,
)


def create_mock_async_client(mock_client):
    """Make a mock usable as `async with Client(...) as client`."""
    mock_client.__aenter__ = AsyncMock(return_value=mock_client)
    mock_client.__aexit__ = AsyncMock(return_value=None)
    return mock_client


def create_mock_llm_client(completion=None, error=None):
    """Create a mock AsyncOpenAI client whose completion call returns or raises."""
    client = create_mock_async_client(MagicMock())
    client.chat.completions.create = AsyncMock(return_value=completion, side_effect=error)
    return client


def create_mock_http_client(response=None, error=None):
    """Create a mock httpx.AsyncClient whose GET returns or raises."""
    client = create_mock_async_client(MagicMock())
    client.get = AsyncMock(return_value=response, side_effect=error)
    return client


def create_mock_image_response(body, status_code=200):
    """Create a mock httpx response with a JSON body."""
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = body
    return response


def create_mock_completion(content):
    """Create a mock chat completion with a single choice."""
    completion = MagicMock()
    completion.choices = [MagicMock(message=MagicMock(content=content))]
    return completion


@pytest.fixture
def mock_generator():
    """Text generator that returns four well-formed paragraphs."""
    generator = AsyncMock(spec=TextGenerator)
    generator.generate.return_value = UpstreamResult.success(STORY_TEXT)
    return generator


@pytest.fixture
def mock_searcher():
    """Image searcher that returns four URLs."""
    searcher = AsyncMock(spec=ImageSearcher)
    searcher.search.return_value = UpstreamResult.success(list(IMAGE_URLS))
    return searcher


@pytest.fixture
def client_with_mocks(mock_generator, mock_searcher):
    """TestClient with the real StoryService wired to mocked upstream clients."""
    app.dependency_overrides[get_settings] = lambda: TEST_SETTINGS
    app.dependency_overrides[get_text_generator] = lambda: mock_generator
    app.dependency_overrides[get_image_searcher] = lambda: mock_searcher

    with TestClient(app) as client:
        yield client, mock_generator, mock_searcher

    app.dependency_overrides.clear()


@pytest.fixture
def client():
    """TestClient with real upstream clients and test settings."""
    app.dependency_overrides[get_settings] = lambda: TEST_SETTINGS

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()
