"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. Services depend on
these contracts only, which is what lets tests run them against
in-memory doubles.
"""

from abc import ABC, abstractmethod
from datetime import datetime

from eventhub.domain import Event, Ticket


class DuplicateRecordError(Exception):
    """A write violated a uniqueness constraint in the backing store."""


class ReferencedRecordError(Exception):
    """A delete was refused because other records still point at the row."""


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    async def list_events(self) -> list[Event]:
        """Return all events in insertion order."""
        ...

    @abstractmethod
    async def get_event(self, event_id: int) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    async def find_event_by_name(self, name: str) -> Event | None:
        """Return the event with exactly this name, or None."""
        ...

    @abstractmethod
    async def add_event(self, name: str, date: datetime) -> Event:
        """Persist a new event.

        Raises:
            DuplicateRecordError: If the name is already taken.
        """
        ...

    @abstractmethod
    async def update_event(self, event_id: int, name: str, date: datetime) -> Event | None:
        """Overwrite name and date; None if the event does not exist.

        Raises:
            DuplicateRecordError: If the name is taken by another event.
        """
        ...

    @abstractmethod
    async def delete_event(self, event_id: int) -> bool:
        """Remove an event. Return False if it did not exist.

        Raises:
            ReferencedRecordError: If tickets still reference the event.
        """
        ...


class TicketStore(ABC):
    """Interface for ticket persistence operations."""

    @abstractmethod
    async def list_tickets_for_event(self, event_id: int) -> list[Ticket]:
        """Return an event's tickets in insertion order."""
        ...

    @abstractmethod
    async def get_ticket(self, ticket_id: int) -> Ticket | None:
        ...

    @abstractmethod
    async def find_ticket_by_code(self, event_id: int, code: str) -> Ticket | None:
        ...

    @abstractmethod
    async def count_tickets_for_event(self, event_id: int) -> int:
        ...

    @abstractmethod
    async def add_ticket(self, code: str, owner: str, event_id: int) -> Ticket:
        """Persist a new unused ticket.

        Raises:
            DuplicateRecordError: If the code already exists for this event.
        """
        ...

    @abstractmethod
    async def mark_ticket_used(self, ticket_id: int) -> bool:
        """Flip `used` to true only if it is still false.

        Returns True when this call performed the transition.
        """
        ...
