"""
Tests for event CRUD endpoints.
"""

import pytest
from httpx import AsyncClient

from eventhub.domain.validators import format_timestamp
from eventhub.models.event import Event

from tests.factories import past_date


@pytest.mark.asyncio
async def test_list_events_empty(client: AsyncClient):
    """Empty store returns an empty array, not an error."""
    response = await client.get("/events")
    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.asyncio
async def test_list_events_in_creation_order(client: AsyncClient, create_event):
    first = await create_event(name="Rock in Rio")
    second = await create_event(name="Lollapalooza")

    response = await client.get("/events")
    assert response.status_code == 200
    data = response.json()
    assert [e["id"] for e in data] == [first.id, second.id]
    assert set(data[0]) == {"id", "name", "date"}


@pytest.mark.asyncio
async def test_get_event(client: AsyncClient, test_event):
    response = await client.get(f"/events/{test_event.id}")
    assert response.status_code == 200
    assert response.json() == {
        "id": test_event.id,
        "name": "Test Concert",
        "date": format_timestamp(test_event.date),
    }


@pytest.mark.asyncio
async def test_get_event_not_found(client: AsyncClient):
    response = await client.get("/events/999")
    assert response.status_code == 404
    assert "not found" in response.json()["detail"]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "bad_id", ["abc", "-5", "0", "1.5", "2147483648", "99999999999999999999"]
)
async def test_get_event_invalid_id(client: AsyncClient, bad_id):
    """Malformed ids are 400, never 404."""
    response = await client.get(f"/events/{bad_id}")
    assert response.status_code == 400
    assert "Invalid id" in response.json()["detail"]


@pytest.mark.asyncio
async def test_create_event(client: AsyncClient):
    payload = {"name": "Show do Coldplay", "date": "2025-12-25T22:00:00.000Z"}
    response = await client.post("/events", json=payload)
    assert response.status_code == 201
    data = response.json()
    assert isinstance(data["id"], int)
    assert data["name"] == payload["name"]
    assert data["date"] == payload["date"]


@pytest.mark.asyncio
async def test_create_event_date_round_trips(client: AsyncClient):
    """A date sent with an offset comes back as the same instant in UTC."""
    response = await client.post(
        "/events",
        json={"name": "Carnaval", "date": "2030-02-10T20:30:00-03:00"},
    )
    assert response.status_code == 201
    event_id = response.json()["id"]

    fetched = await client.get(f"/events/{event_id}")
    assert fetched.json()["date"] == "2030-02-10T23:30:00.000Z"


@pytest.mark.asyncio
async def test_create_event_in_the_past_is_allowed(client: AsyncClient):
    response = await client.post(
        "/events",
        json={"name": "Retro Night", "date": past_date(10).isoformat()},
    )
    assert response.status_code == 201


@pytest.mark.asyncio
async def test_create_event_duplicate_name(client: AsyncClient, create_event):
    await create_event(name="Coldplay Show")

    response = await client.post(
        "/events",
        json={"name": "Coldplay Show", "date": "2025-12-25T22:00:00.000Z"},
    )
    assert response.status_code == 409
    assert "already registered" in response.json()["detail"]


@pytest.mark.asyncio
async def test_event_names_are_case_sensitive(client: AsyncClient, create_event):
    await create_event(name="Coldplay Show")

    response = await client.post(
        "/events",
        json={"name": "coldplay show", "date": "2025-12-25T22:00:00.000Z"},
    )
    assert response.status_code == 201


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        {"name": "", "date": "invalid-date"},
        {"name": "   ", "date": "2025-12-25T22:00:00.000Z"},
        {"name": "No Date"},
        {"date": "2025-12-25T22:00:00.000Z"},
        {"name": "Bad Date", "date": "25/12/2025"},
        {"name": "Too Early", "date": "0001-01-01T00:00:00+05:00"},
        {"name": "Too Late", "date": "9999-12-31T23:00:00-05:00"},
    ],
)
async def test_create_event_invalid_body(client: AsyncClient, payload):
    response = await client.post("/events", json=payload)
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_update_event(client: AsyncClient, test_event, db_session):
    payload = {"name": "Evento Atualizado", "date": "2026-01-01T22:00:00.000Z"}
    response = await client.put(f"/events/{test_event.id}", json=payload)
    assert response.status_code == 200
    assert response.json() == {"id": test_event.id, **payload}

    stored = await db_session.get(Event, test_event.id)
    assert stored.name == payload["name"]
    assert format_timestamp(stored.date) == payload["date"]


@pytest.mark.asyncio
async def test_update_event_keeping_its_own_name(client: AsyncClient, test_event):
    response = await client.put(
        f"/events/{test_event.id}",
        json={"name": test_event.name, "date": "2031-05-01T18:00:00.000Z"},
    )
    assert response.status_code == 200
    assert response.json()["date"] == "2031-05-01T18:00:00.000Z"


@pytest.mark.asyncio
async def test_update_event_to_taken_name(client: AsyncClient, create_event):
    await create_event(name="Taken")
    other = await create_event(name="Other")

    response = await client.put(
        f"/events/{other.id}",
        json={"name": "Taken", "date": "2031-05-01T18:00:00.000Z"},
    )
    assert response.status_code == 409


@pytest.mark.asyncio
async def test_update_event_not_found(client: AsyncClient):
    response = await client.put(
        "/events/999",
        json={"name": "Ghost", "date": "2031-05-01T18:00:00.000Z"},
    )
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_update_event_invalid_id(client: AsyncClient):
    response = await client.put(
        "/events/abc",
        json={"name": "Ghost", "date": "2031-05-01T18:00:00.000Z"},
    )
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_update_event_invalid_body(client: AsyncClient, test_event):
    response = await client.put(f"/events/{test_event.id}", json={"name": "", "date": "soon"})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_update_event_date_out_of_range(client: AsyncClient, test_event):
    response = await client.put(
        f"/events/{test_event.id}",
        json={"name": "Moved", "date": "0001-01-01T00:00:00+05:00"},
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_oversized_id_is_rejected_on_every_verb(client: AsyncClient):
    huge = "99999999999999999999"
    body = {"name": "Any", "date": "2030-01-01T00:00:00.000Z"}

    assert (await client.put(f"/events/{huge}", json=body)).status_code == 400
    assert (await client.delete(f"/events/{huge}")).status_code == 400


@pytest.mark.asyncio
async def test_delete_event(client: AsyncClient, test_event, db_session):
    response = await client.delete(f"/events/{test_event.id}")
    assert response.status_code == 204
    assert response.content == b""

    assert await db_session.get(Event, test_event.id) is None


@pytest.mark.asyncio
async def test_delete_event_not_found(client: AsyncClient):
    response = await client.delete("/events/999")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_delete_event_with_tickets_is_refused(client: AsyncClient, create_ticket, db_session):
    ticket = await create_ticket()

    response = await client.delete(f"/events/{ticket.event_id}")
    assert response.status_code == 409

    assert await db_session.get(Event, ticket.event_id) is not None
