"""FastAPI application for the Cultural Story Scenes service."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import get_settings
from .logging import configure_logging
from .routes import story

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - startup and shutdown."""
    settings = get_settings()
    configure_logging(json_format=settings.log_json)

    for key in settings.missing_keys():
        logger.warning(f"{key} not set - story requests will fail")

    logger.info(f"Backend running on http://localhost:{settings.port}")

    yield


app = FastAPI(
    title="Cultural Story Scenes API",
    description="""
Write short cultural stories and illustrate them with photos.

## Workflow
1. POST `/api/story` with a topic, a cultural zone and a language
2. Receive four scenes, each a paragraph with a photo URL
    """,
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware for web frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(story.router, prefix="/api", tags=["Story"])


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
