"""Fixtures for tests that call the real Groq and Unsplash APIs."""

import os

import pytest
from dotenv import find_dotenv, load_dotenv
from fastapi.testclient import TestClient

# Load environment variables (find_dotenv searches parent directories)
load_dotenv(find_dotenv())

from story_scenes.api.main import app  # noqa: E402


@pytest.fixture
def live_client():
    """TestClient against real upstream APIs; skips without credentials."""
    if not os.getenv("GROQ_API_KEY") or not os.getenv("UNSPLASH_ACCESS_KEY"):
        pytest.skip("GROQ_API_KEY and UNSPLASH_ACCESS_KEY must be set")

    with TestClient(app) as client:
        yield client
