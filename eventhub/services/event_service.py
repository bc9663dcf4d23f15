"""
Event service - name uniqueness, date validity and the delete policy.

Services:
- Depend only on store interfaces
- Validate structure first, then existence, then uniqueness
- Raise domain errors; HTTP mapping happens in main.py
"""

from datetime import datetime
from typing import Any, Callable

from eventhub.core.logging import get_logger
from eventhub.core.metrics import record_event_write
from eventhub.domain import ConflictError, Event, NotFoundError, utc_now
from eventhub.domain.validators import parse_resource_id, parse_timestamp, require_text
from eventhub.stores.interfaces import (
    DuplicateRecordError,
    EventStore,
    ReferencedRecordError,
    TicketStore,
)

logger = get_logger(__name__)

DUPLICATE_NAME_MESSAGE = "Event name already registered"
HAS_TICKETS_MESSAGE = "Event has registered tickets and cannot be deleted"


class EventService:
    """Service for event catalog operations."""

    def __init__(
        self,
        store: EventStore,
        tickets: TicketStore,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._store = store
        self._tickets = tickets
        self._clock = clock

    async def list_events(self) -> list[Event]:
        return await self._store.list_events()

    async def get_event(self, event_id: Any) -> Event:
        """Return an event by ID.

        Raises:
            InvalidArgumentError: If the id is not a positive integer.
            NotFoundError: If the event does not exist.
        """
        event = await self._store.get_event(parse_resource_id(event_id))
        if event is None:
            raise NotFoundError("Event")
        return event

    async def create_event(self, name: Any, date: Any) -> Event:
        """Create an event with a unique name.

        Raises:
            UnprocessableInputError: If name is blank or date does not parse.
            ConflictError: If another event already uses the name.
        """
        name = require_text("name", name)
        when = parse_timestamp(date)

        if await self._store.find_event_by_name(name) is not None:
            logger.warning("event_rejected", reason="duplicate_name", name=name)
            raise ConflictError(DUPLICATE_NAME_MESSAGE)

        try:
            event = await self._store.add_event(name, when)
        except DuplicateRecordError as exc:
            raise ConflictError(DUPLICATE_NAME_MESSAGE) from exc

        record_event_write("create")
        logger.info("event_created", event_id=event.id, name=event.name, date=event.date.isoformat())
        self._warn_if_past(event)
        return event

    async def update_event(self, event_id: Any, name: Any, date: Any) -> Event:
        """Overwrite an event's name and date.

        Raises:
            InvalidArgumentError: If the id is not a positive integer.
            UnprocessableInputError: If name is blank or date does not parse.
            NotFoundError: If the event does not exist.
            ConflictError: If a different event already uses the name.
        """
        event_id = parse_resource_id(event_id)
        name = require_text("name", name)
        when = parse_timestamp(date)

        if await self._store.get_event(event_id) is None:
            raise NotFoundError("Event")

        holder = await self._store.find_event_by_name(name)
        if holder is not None and holder.id != event_id:
            logger.warning("event_rejected", reason="duplicate_name", name=name, event_id=event_id)
            raise ConflictError(DUPLICATE_NAME_MESSAGE)

        try:
            event = await self._store.update_event(event_id, name, when)
        except DuplicateRecordError as exc:
            raise ConflictError(DUPLICATE_NAME_MESSAGE) from exc
        if event is None:
            raise NotFoundError("Event")

        record_event_write("update")
        logger.info("event_updated", event_id=event.id, name=event.name, date=event.date.isoformat())
        self._warn_if_past(event)
        return event

    async def delete_event(self, event_id: Any) -> None:
        """Delete an event that has no tickets.

        Raises:
            InvalidArgumentError: If the id is not a positive integer.
            NotFoundError: If the event does not exist.
            ConflictError: If tickets were issued for the event.
        """
        event_id = parse_resource_id(event_id)
        if await self._store.get_event(event_id) is None:
            raise NotFoundError("Event")

        ticket_count = await self._tickets.count_tickets_for_event(event_id)
        if ticket_count:
            logger.warning("event_delete_blocked", event_id=event_id, tickets=ticket_count)
            raise ConflictError(HAS_TICKETS_MESSAGE)

        try:
            deleted = await self._store.delete_event(event_id)
        except ReferencedRecordError as exc:
            # A ticket was issued between the count and the delete
            logger.warning("event_delete_blocked", event_id=event_id, reason="referenced")
            raise ConflictError(HAS_TICKETS_MESSAGE) from exc
        if not deleted:
            raise NotFoundError("Event")

        record_event_write("delete")
        logger.info("event_deleted", event_id=event_id)

    def is_past(self, event: Event) -> bool:
        """True once the event is no longer strictly in the future."""
        return event.has_happened(self._clock())

    def _warn_if_past(self, event: Event) -> None:
        # Accepted, but no ticket can be issued or used for it
        if self.is_past(event):
            logger.warning("event_scheduled_in_past", event_id=event.id, date=event.date.isoformat())
