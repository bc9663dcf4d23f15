"""
Ticket endpoints: list per event, issue, and mark as used.
"""

from fastapi import APIRouter, Depends, Response, status

from eventhub.api.deps import get_ticket_service
from eventhub.schemas.ticket import TicketCreate, TicketResponse
from eventhub.services.ticket_service import TicketService

router = APIRouter(prefix="/tickets", tags=["Tickets"])


@router.get("/{event_id}", response_model=list[TicketResponse])
async def list_tickets_endpoint(event_id: str, service: TicketService = Depends(get_ticket_service)):
    """Tickets issued for an event. Unknown events yield an empty list."""
    return await service.list_tickets(event_id)


@router.post("", response_model=TicketResponse, status_code=status.HTTP_201_CREATED)
async def create_ticket_endpoint(
    ticket_data: TicketCreate,
    service: TicketService = Depends(get_ticket_service),
):
    """
    Issue a ticket.

    403 if the event already happened, 404 if it does not exist,
    409 if the code is taken within the event.
    """
    return await service.create_ticket(ticket_data.code, ticket_data.owner, ticket_data.event_id)


@router.put("/use/{ticket_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def use_ticket_endpoint(ticket_id: str, service: TicketService = Depends(get_ticket_service)):
    """Mark a ticket as used. A second call on the same ticket is 403."""
    await service.use_ticket(ticket_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
