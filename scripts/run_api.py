#!/usr/bin/env python3
"""Run the FastAPI server for the Cultural Story Scenes service."""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import uvicorn

from story_scenes.api.config import get_settings


def main():
    """Run the API server."""
    settings = get_settings()
    uvicorn.run(
        "story_scenes.api.main:app",
        host=settings.host,
        port=settings.port,
    )


if __name__ == "__main__":
    main()
