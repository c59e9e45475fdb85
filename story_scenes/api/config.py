"""API configuration.

Settings are read from the environment once per process and injected into
handlers through FastAPI dependencies.
"""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)

# Fixed listening address
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 5000


@dataclass(frozen=True)
class Settings:
    """Immutable process configuration."""

    groq_api_key: str = ""
    unsplash_access_key: str = ""
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_json: bool = True

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables (and .env, if present)."""
        # find_dotenv searches parent directories
        load_dotenv(find_dotenv())
        return cls(
            groq_api_key=os.getenv("GROQ_API_KEY", ""),
            unsplash_access_key=os.getenv("UNSPLASH_ACCESS_KEY", ""),
            log_json=os.getenv("LOG_FORMAT", "json").lower() != "text",
        )

    def missing_keys(self) -> list[str]:
        """Names of API keys that are not configured."""
        missing = []
        if not self.groq_api_key:
            missing.append("GROQ_API_KEY")
        if not self.unsplash_access_key:
            missing.append("UNSPLASH_ACCESS_KEY")
        return missing


@lru_cache
def get_settings() -> Settings:
    """Get the process-wide settings, built on first use."""
    return Settings.from_env()
