"""
Ticket service with issuance rules and the one-shot `used` transition.

Issuance order of checks:
  1. code / owner / eventId are well formed     -> UnprocessableInput
  2. the event exists                           -> NotFound
  3. the event is strictly in the future        -> Forbidden
  4. the code is free within that event         -> Conflict

Usage is a compare-and-set on `used = false`. The read-side guard gives the
caller a precise answer; the conditional UPDATE is what stops two concurrent
requests from both succeeding on the same ticket.
"""

from datetime import datetime
from typing import Any, Callable

from eventhub.core.logging import get_logger
from eventhub.core.metrics import record_ticket_issued, record_ticket_usage
from eventhub.domain import ConflictError, ForbiddenError, NotFoundError, Ticket, utc_now
from eventhub.domain.validators import parse_reference_id, parse_resource_id, require_text
from eventhub.stores.interfaces import DuplicateRecordError, EventStore, TicketStore

logger = get_logger(__name__)

EVENT_HAPPENED_MESSAGE = "Event already happened"
DUPLICATE_CODE_MESSAGE = "Ticket code already registered for this event"
CANNOT_USE_MESSAGE = "Event already happened or ticket was already used"


class TicketService:
    """Service for ticket issuance and usage."""

    def __init__(
        self,
        tickets: TicketStore,
        events: EventStore,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._tickets = tickets
        self._events = events
        self._clock = clock

    async def list_tickets(self, event_id: Any) -> list[Ticket]:
        """Tickets of an event; an unknown event simply has none."""
        return await self._tickets.list_tickets_for_event(parse_resource_id(event_id))

    async def create_ticket(self, code: Any, owner: Any, event_id: Any) -> Ticket:
        """Issue a ticket for an upcoming event.

        Raises:
            UnprocessableInputError: If code, owner or eventId is malformed.
            NotFoundError: If the event does not exist.
            ForbiddenError: If the event is not strictly in the future.
            ConflictError: If the code is already used for this event.
        """
        code = require_text("code", code)
        owner = require_text("owner", owner)
        event_id = parse_reference_id("eventId", event_id)

        event = await self._events.get_event(event_id)
        if event is None:
            raise NotFoundError("Event")

        if event.has_happened(self._clock()):
            logger.warning("ticket_rejected", reason="event_happened", event_id=event_id)
            raise ForbiddenError(EVENT_HAPPENED_MESSAGE)

        if await self._tickets.find_ticket_by_code(event_id, code) is not None:
            logger.warning("ticket_rejected", reason="duplicate_code", event_id=event_id, code=code)
            raise ConflictError(DUPLICATE_CODE_MESSAGE)

        try:
            ticket = await self._tickets.add_ticket(code, owner, event_id)
        except DuplicateRecordError as exc:
            raise ConflictError(DUPLICATE_CODE_MESSAGE) from exc

        record_ticket_issued()
        logger.info("ticket_created", ticket_id=ticket.id, event_id=event_id, code=code)
        return ticket

    async def use_ticket(self, ticket_id: Any) -> None:
        """Mark a ticket as used.

        Raises:
            InvalidArgumentError: If the id is not a positive integer.
            NotFoundError: If the ticket does not exist.
            ForbiddenError: If the ticket was used or its event already happened.
        """
        ticket_id = parse_resource_id(ticket_id)

        ticket = await self._tickets.get_ticket(ticket_id)
        if ticket is None:
            raise NotFoundError("Ticket")

        event = await self._events.get_event(ticket.event_id)
        # FK guarantees the event; treat a vanished one like a past event
        happened = event is None or event.has_happened(self._clock())

        if ticket.used or happened:
            record_ticket_usage(False)
            logger.warning(
                "ticket_use_rejected",
                ticket_id=ticket_id,
                already_used=ticket.used,
                event_happened=happened,
            )
            raise ForbiddenError(CANNOT_USE_MESSAGE)

        if not await self._tickets.mark_ticket_used(ticket_id):
            record_ticket_usage(False)
            logger.warning("ticket_use_rejected", ticket_id=ticket_id, reason="concurrent_use")
            raise ForbiddenError(CANNOT_USE_MESSAGE)

        record_ticket_usage(True)
        logger.info("ticket_used", ticket_id=ticket_id, event_id=ticket.event_id)
