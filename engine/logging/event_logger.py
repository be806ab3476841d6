"""
JSONL event logger with Windows Event Viewer style Event IDs.

Async-safe append-only logging for search and scoring activity.
"""
import asyncio
from pathlib import Path
from typing import Optional, List

from engine.schemas import Event, EventLevel, EventCategory, TrustScoreResult
import config


class EventLogger:
    """
    Async JSONL logger for Recensor events.

    Event ID ranges:
    - 1001 to 1999: Scoring events
    - 2001 to 2999: Search events
    - 4001 to 4999: System events

    All events written to logs/events.jsonl in append-only mode.
    """

    def __init__(self, log_path: Path = config.EVENT_LOG_FILE):
        self.log_path = log_path
        self.lock = asyncio.Lock()

    async def log_event(self, event: Event) -> None:
        """
        Append event to JSONL log file.

        Serialised with an async lock so concurrent requests don't interleave lines.

        Args:
            event: Event object to log
        """
        async with self.lock:
            # Parent may have been removed by a demo reset
            self.log_path.parent.mkdir(parents=True, exist_ok=True)

            with open(self.log_path, "a", encoding="utf-8") as f:
                f.write(event.to_jsonl() + "\n")

    async def log_product_scored(
        self,
        query_id: str,
        product_id: str,
        title: str,
        result: TrustScoreResult,
        user_id: str = "system"
    ):
        """
        Log a scored product.

        Event ID: 1001 (scored) or 1002 (below config.LOW_TRUST_THRESHOLD)
        """
        if result.overall < config.LOW_TRUST_THRESHOLD:
            event_id = 1002
            level = EventLevel.WARNING
            message = f"Low trust product scored - {product_id}: {result.overall}/100"
        else:
            event_id = 1001
            level = EventLevel.INFORMATION
            message = f"Product scored - {product_id}: {result.overall}/100"

        event = Event(
            event_id=event_id,
            level=level,
            category=EventCategory.SCORING,
            message=message,
            user_id=user_id,
            details={
                "query_id": query_id,
                "product_id": product_id,
                "title": title[:100] + "..." if len(title) > 100 else title,
                "trust_scores": {
                    "overall": result.overall,
                    "rating": result.rating,
                    "volume": result.volume,
                    "authenticity": result.authenticity,
                    "sentiment": result.sentiment
                },
                "factors": result.factors
            }
        )
        await self.log_event(event)

    async def log_search(
        self,
        query_id: str,
        query_text: str,
        result_count: int,
        user_id: str = "system",
        error: Optional[str] = None
    ):
        """
        Log a search request.

        Event IDs:
        - 2001: Search executed
        - 2002: No products returned
        - 2003: Product source failed (treated as zero results)
        """
        if error is not None:
            event_id = 2003
            level = EventLevel.ERROR
        elif result_count == 0:
            event_id = 2002
            level = EventLevel.WARNING
        else:
            event_id = 2001
            level = EventLevel.INFORMATION

        details = {
            "query_id": query_id,
            "query_text": query_text[:100] + "..." if len(query_text) > 100 else query_text,
            "result_count": result_count
        }
        if error is not None:
            details["error"] = error

        event = Event(
            event_id=event_id,
            level=level,
            category=EventCategory.SEARCH,
            message=f"{config.EVENT_IDS[event_id]}: {query_text[:50]}",
            user_id=user_id,
            details=details
        )
        await self.log_event(event)

    async def log_system_event(
        self,
        event_id: int,
        message: str,
        details: Optional[dict] = None
    ):
        """
        Log system-level event.

        Event IDs:
        - 4001: Service started
        - 4004: Demo reset
        """
        event = Event(
            event_id=event_id,
            level=EventLevel.INFORMATION,
            category=EventCategory.SYSTEM,
            message=message,
            details=details or {}
        )
        await self.log_event(event)

    def read_events(self, limit: int = 100, level: Optional[EventLevel] = None) -> List[Event]:
        """
        Read recent events from log.

        Args:
            limit: Maximum number of events to return
            level: Filter by event level (optional)

        Returns:
            List of Event objects (most recent first)
        """
        if not self.log_path.exists():
            return []

        events = []
        with open(self.log_path, "r", encoding="utf-8") as f:
            lines = f.readlines()

        for line in reversed(lines):
            if not line.strip():
                continue
            try:
                event = Event.model_validate_json(line)
            except ValueError:
                # Skip malformed lines
                continue
            if level is None or event.level == level:
                events.append(event)
                if len(events) >= limit:
                    break

        return events

    def get_event_count(self) -> int:
        """Get total number of events logged"""
        if not self.log_path.exists():
            return 0

        with open(self.log_path, "r", encoding="utf-8") as f:
            return sum(1 for line in f if line.strip())

    def clear(self) -> None:
        """Delete the log file"""
        if self.log_path.exists():
            self.log_path.unlink()


# Global logger instance
logger = EventLogger()
