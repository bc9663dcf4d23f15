"""
SQLAlchemy implementation of the event and ticket stores.

Stores flush but never commit: the request's session (see db.session.get_db)
owns the transaction. Uniqueness is ultimately enforced by the database
constraints, so an IntegrityError on flush is reported as a store error
(duplicate on writes, still-referenced on deletes).
"""

from datetime import datetime

from sqlalchemy import select, update, func, false
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from eventhub.core.logging import get_logger
from eventhub.domain import Event, Ticket
from eventhub.domain.validators import as_utc
from eventhub.models.event import Event as EventRow
from eventhub.models.ticket import Ticket as TicketRow
from eventhub.stores.interfaces import (
    DuplicateRecordError,
    EventStore,
    ReferencedRecordError,
    TicketStore,
)

logger = get_logger(__name__)


def _to_event(row: EventRow) -> Event:
    # SQLite hands back naive datetimes; values are always written in UTC
    return Event(id=row.id, name=row.name, date=as_utc(row.date))


def _to_ticket(row: TicketRow) -> Ticket:
    return Ticket(
        id=row.id,
        code=row.code,
        owner=row.owner,
        event_id=row.event_id,
        used=bool(row.used),
    )


async def _flush_or_raise(session: AsyncSession, what: str, error: type[Exception]) -> None:
    try:
        await session.flush()
    except IntegrityError as exc:
        await session.rollback()
        logger.info("integrity_violation", record=what, error=str(exc.orig))
        raise error(what) from exc


class SqlAlchemyEventStore(EventStore):
    """Relational event store backed by an AsyncSession."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_events(self) -> list[Event]:
        result = await self._session.execute(select(EventRow).order_by(EventRow.id.asc()))
        return [_to_event(row) for row in result.scalars().all()]

    async def get_event(self, event_id: int) -> Event | None:
        row = await self._session.get(EventRow, event_id)
        return _to_event(row) if row else None

    async def find_event_by_name(self, name: str) -> Event | None:
        result = await self._session.execute(select(EventRow).where(EventRow.name == name))
        row = result.scalar_one_or_none()
        return _to_event(row) if row else None

    async def add_event(self, name: str, date: datetime) -> Event:
        row = EventRow(name=name, date=as_utc(date))
        self._session.add(row)
        await _flush_or_raise(self._session, "event", DuplicateRecordError)
        return _to_event(row)

    async def update_event(self, event_id: int, name: str, date: datetime) -> Event | None:
        row = await self._session.get(EventRow, event_id)
        if row is None:
            return None
        row.name = name
        row.date = as_utc(date)
        await _flush_or_raise(self._session, "event", DuplicateRecordError)
        return Event(id=event_id, name=name, date=as_utc(date))

    async def delete_event(self, event_id: int) -> bool:
        row = await self._session.get(EventRow, event_id)
        if row is None:
            return False
        await self._session.delete(row)
        # A ticket committed after the service's count still trips the FK
        await _flush_or_raise(self._session, "event", ReferencedRecordError)
        return True


class SqlAlchemyTicketStore(TicketStore):
    """Relational ticket store backed by an AsyncSession."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_tickets_for_event(self, event_id: int) -> list[Ticket]:
        result = await self._session.execute(
            select(TicketRow)
            .where(TicketRow.event_id == event_id)
            .order_by(TicketRow.id.asc())
        )
        return [_to_ticket(row) for row in result.scalars().all()]

    async def get_ticket(self, ticket_id: int) -> Ticket | None:
        # mark_ticket_used writes without touching loaded rows, so always reload
        row = await self._session.get(TicketRow, ticket_id, populate_existing=True)
        return _to_ticket(row) if row else None

    async def find_ticket_by_code(self, event_id: int, code: str) -> Ticket | None:
        result = await self._session.execute(
            select(TicketRow).where(TicketRow.event_id == event_id, TicketRow.code == code)
        )
        row = result.scalar_one_or_none()
        return _to_ticket(row) if row else None

    async def count_tickets_for_event(self, event_id: int) -> int:
        result = await self._session.execute(
            select(func.count()).select_from(TicketRow).where(TicketRow.event_id == event_id)
        )
        return result.scalar_one()

    async def add_ticket(self, code: str, owner: str, event_id: int) -> Ticket:
        row = TicketRow(code=code, owner=owner, event_id=event_id, used=False)
        self._session.add(row)
        await _flush_or_raise(self._session, "ticket", DuplicateRecordError)
        return _to_ticket(row)

    async def mark_ticket_used(self, ticket_id: int) -> bool:
        # Compare-and-set: only one concurrent caller can match used = false
        result = await self._session.execute(
            update(TicketRow)
            .where(TicketRow.id == ticket_id, TicketRow.used == false())
            .values(used=True)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount == 1
