"""
Dependency wiring: one session per request, stores built on it, services on stores.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from eventhub.db.session import get_db
from eventhub.services.event_service import EventService
from eventhub.services.ticket_service import TicketService
from eventhub.stores.sqlalchemy_store import SqlAlchemyEventStore, SqlAlchemyTicketStore


def get_event_service(db: AsyncSession = Depends(get_db)) -> EventService:
    return EventService(SqlAlchemyEventStore(db), SqlAlchemyTicketStore(db))


def get_ticket_service(db: AsyncSession = Depends(get_db)) -> TicketService:
    return TicketService(SqlAlchemyTicketStore(db), SqlAlchemyEventStore(db))
