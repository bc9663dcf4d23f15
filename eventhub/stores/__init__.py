from eventhub.stores.interfaces import DuplicateRecordError, EventStore, ReferencedRecordError, TicketStore
from eventhub.stores.sqlalchemy_store import SqlAlchemyEventStore, SqlAlchemyTicketStore

__all__ = [
    "DuplicateRecordError",
    "ReferencedRecordError",
    "EventStore",
    "TicketStore",
    "SqlAlchemyEventStore",
    "SqlAlchemyTicketStore",
]
