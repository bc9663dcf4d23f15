from eventhub.schemas.event import EventCreate, EventUpdate, EventResponse
from eventhub.schemas.ticket import TicketCreate, TicketResponse

__all__ = [
    "EventCreate", "EventUpdate", "EventResponse",
    "TicketCreate", "TicketResponse",
]
