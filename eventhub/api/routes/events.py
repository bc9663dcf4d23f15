"""
Event endpoints.

Path ids are taken as raw strings so that a malformed id is reported by the
service as 400 "Invalid id" instead of FastAPI's generic 422.
"""

from fastapi import APIRouter, Depends, Response, status

from eventhub.api.deps import get_event_service
from eventhub.schemas.event import EventCreate, EventUpdate, EventResponse
from eventhub.services.event_service import EventService

router = APIRouter(prefix="/events", tags=["Events"])


@router.get("", response_model=list[EventResponse])
async def list_events_endpoint(service: EventService = Depends(get_event_service)):
    """List every event in creation order."""
    return await service.list_events()


@router.get("/{event_id}", response_model=EventResponse)
async def get_event_endpoint(event_id: str, service: EventService = Depends(get_event_service)):
    return await service.get_event(event_id)


@router.post("", response_model=EventResponse, status_code=status.HTTP_201_CREATED)
async def create_event_endpoint(
    event_data: EventCreate,
    service: EventService = Depends(get_event_service),
):
    """Create an event. Names are unique across all events."""
    return await service.create_event(event_data.name, event_data.date)


@router.put("/{event_id}", response_model=EventResponse)
async def update_event_endpoint(
    event_id: str,
    event_data: EventUpdate,
    service: EventService = Depends(get_event_service),
):
    return await service.update_event(event_id, event_data.name, event_data.date)


@router.delete("/{event_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_event_endpoint(event_id: str, service: EventService = Depends(get_event_service)):
    """Delete an event. Refused with 409 while tickets exist for it."""
    await service.delete_event(event_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
