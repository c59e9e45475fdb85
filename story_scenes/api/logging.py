"""Structured logging infrastructure for the API layer.

Provides JSON-formatted logging for production and human-readable
logging for development, plus a StoryLogger helper for story request events.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Optional

# Extra record attributes copied into JSON output
STRUCTURED_FIELDS = (
    "request_id",
    "stage",
    "duration",
    "error_type",
    "failure_reason",
    "zone",
    "language",
)


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for name in STRUCTURED_FIELDS:
            if hasattr(record, name):
                log_data[name] = getattr(record, name)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


def configure_logging(json_format: bool = True, level: int = logging.INFO) -> None:
    """Configure structured logging for the application."""
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)

    if json_format:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )

    root_logger.addHandler(handler)


class StoryLogger:
    """Logger for story request events with structured fields."""

    def __init__(self):
        self.logger = logging.getLogger("story_requests")

    def request_received(
        self, request_id: str, zone: Optional[str], language: Optional[str], query: str
    ) -> None:
        self.logger.info(
            f"Request: {query}",
            extra={"request_id": request_id, "stage": "received", "zone": zone, "language": language},
        )

    def request_rejected(self, request_id: str, reason: str) -> None:
        self.logger.info(
            f"Request rejected: {reason}",
            extra={"request_id": request_id, "stage": "rejected"},
        )

    def stage_completed(self, request_id: str, stage: str, duration: Optional[float] = None) -> None:
        extra = {"request_id": request_id, "stage": stage}
        if duration is not None:
            extra["duration"] = round(duration, 2)
        self.logger.info(f"Stage completed: {stage}", extra=extra)

    def request_completed(self, request_id: str, duration: float) -> None:
        self.logger.info(
            "Story request completed",
            extra={"request_id": request_id, "stage": "completed", "duration": round(duration, 2)},
        )

    def request_failed(
        self,
        request_id: str,
        stage: str,
        failure_reason: str,
        error: Optional[Exception] = None,
    ) -> None:
        extra = {"request_id": request_id, "stage": stage, "failure_reason": failure_reason}
        if error is not None:
            extra["error_type"] = type(error).__name__
        self.logger.error(
            f"Story request failed at {stage}: {error or failure_reason}",
            extra=extra,
            exc_info=error,
        )


# Global story logger instance
story_logger = StoryLogger()
