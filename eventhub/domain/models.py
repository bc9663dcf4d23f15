"""Domain models representing persisted state.

These are plain objects with no API input rules.
SQLAlchemy ORM models are in eventhub/models (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime, timezone


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: int
    name: str
    date: datetime

    def has_happened(self, now: datetime) -> bool:
        """An event counts as happened unless it is strictly in the future."""
        return self.date <= now


@dataclass(frozen=True)
class Ticket:
    """Domain representation of a Ticket."""

    id: int
    code: str
    owner: str
    event_id: int
    used: bool = False
