"""
Pydantic schemas for ticket-related request/response validation.

Clients speak camelCase (`eventId`); attributes stay snake_case.
"""

from pydantic import BaseModel, Field, field_validator

from eventhub.domain.errors import UnprocessableInputError
from eventhub.domain.validators import MAX_ID, require_text


class TicketCreate(BaseModel):
    code: str
    owner: str
    event_id: int = Field(..., alias="eventId", gt=0, le=MAX_ID)

    model_config = {"populate_by_name": True}

    @field_validator("code", "owner")
    @classmethod
    def text_not_blank(cls, value: str, info) -> str:
        try:
            return require_text(info.field_name, value)
        except UnprocessableInputError as exc:
            raise ValueError(exc.message) from exc


class TicketResponse(BaseModel):
    id: int
    code: str
    owner: str
    event_id: int = Field(..., serialization_alias="eventId")
    used: bool

    model_config = {"from_attributes": True}
