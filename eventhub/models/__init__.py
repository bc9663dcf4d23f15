from eventhub.models.event import Event
from eventhub.models.ticket import Ticket

__all__ = ["Event", "Ticket"]
