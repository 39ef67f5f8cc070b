"""Structured event logging for color analysis requests."""

import logging
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from pydantic import BaseModel


class EventType(str, Enum):
    """Analysis event types."""

    ANALYZE_START = "analyze.start"
    ANALYZE_COMPLETE = "analyze.complete"
    ANALYZE_REJECTED = "analyze.rejected"
    ANALYZE_FAILED = "analyze.failed"


class AnalysisLog(BaseModel):
    """Structured log entry for one analysis event."""

    timestamp: datetime
    event_type: EventType
    event_data: dict[str, Any]
    duration_ms: int | None = None


class AnalysisLogger:
    """Logger that emits one JSON record per analysis event.

    Records go through the standard logging tree under ``palette.events`` and
    can additionally be mirrored to a JSONL file.
    """

    def __init__(self, log_path: str | None = None) -> None:
        self.logger = logging.getLogger("palette.events")
        self._setup_logger(log_path)

    def _setup_logger(self, log_path: str | None) -> None:
        """Configure the event logger."""
        self.logger.setLevel(logging.INFO)
        if log_path:
            handler = logging.FileHandler(log_path, encoding="utf-8")
            handler.setFormatter(logging.Formatter("%(message)s"))
            self.logger.addHandler(handler)

    def log(
        self,
        event_type: EventType,
        event_data: dict[str, Any] | None = None,
        duration_ms: int | None = None,
    ) -> AnalysisLog:
        """Log an analysis event."""
        log_entry = AnalysisLog(
            timestamp=datetime.now(timezone.utc),
            event_type=event_type,
            event_data=event_data or {},
            duration_ms=duration_ms,
        )
        self.logger.info(log_entry.model_dump_json())
        return log_entry

    def log_analysis(
        self,
        image_size: int,
        dominant_hex: str,
        palette_size: int,
        duration_ms: int,
    ) -> None:
        """Log a completed analysis."""
        self.log(
            event_type=EventType.ANALYZE_COMPLETE,
            event_data={
                "image_size": image_size,
                "dominant": dominant_hex,
                "palette_size": palette_size,
            },
            duration_ms=duration_ms,
        )

    def log_rejection(self, code: str, reason: str) -> None:
        """Log a request rejected before extraction."""
        self.log(
            event_type=EventType.ANALYZE_REJECTED,
            event_data={"code": code, "reason": reason},
        )

    def log_failure(self, code: str, image_size: int, duration_ms: int) -> None:
        """Log a failed extraction without the underlying diagnostics."""
        self.log(
            event_type=EventType.ANALYZE_FAILED,
            event_data={"code": code, "image_size": image_size},
            duration_ms=duration_ms,
        )
