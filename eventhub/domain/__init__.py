from eventhub.domain.errors import (
    ConflictError,
    DomainError,
    ErrorCode,
    ForbiddenError,
    InvalidArgumentError,
    NotFoundError,
    UnprocessableInputError,
)
from eventhub.domain.models import Event, Ticket, utc_now

__all__ = [
    "Event",
    "Ticket",
    "utc_now",
    "ErrorCode",
    "DomainError",
    "InvalidArgumentError",
    "UnprocessableInputError",
    "NotFoundError",
    "ConflictError",
    "ForbiddenError",
]
