"""
Pydantic schemas for event-related request/response validation.
"""

from datetime import datetime
from pydantic import BaseModel, field_serializer, field_validator

from eventhub.domain.errors import UnprocessableInputError
from eventhub.domain.validators import format_timestamp, parse_timestamp, require_text


class EventCreate(BaseModel):
    name: str
    date: datetime

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        try:
            return require_text("name", value)
        except UnprocessableInputError as exc:
            raise ValueError(exc.message) from exc

    @field_validator("date", mode="before")
    @classmethod
    def date_is_timestamp(cls, value):
        try:
            return parse_timestamp(value)
        except UnprocessableInputError as exc:
            raise ValueError(exc.message) from exc


class EventUpdate(EventCreate):
    pass


class EventResponse(BaseModel):
    id: int
    name: str
    date: datetime

    model_config = {"from_attributes": True}

    @field_serializer("date")
    def serialize_date(self, value: datetime) -> str:
        return format_timestamp(value)
