"""Domain error codes and the exceptions services raise."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    UNPROCESSABLE_INPUT = "UNPROCESSABLE_INPUT"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    FORBIDDEN = "FORBIDDEN"


HTTP_STATUS_BY_CODE: dict[ErrorCode, int] = {
    ErrorCode.INVALID_ARGUMENT: 400,
    ErrorCode.FORBIDDEN: 403,
    ErrorCode.NOT_FOUND: 404,
    ErrorCode.CONFLICT: 409,
    ErrorCode.UNPROCESSABLE_INPUT: 422,
}


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"

    @property
    def status_code(self) -> int:
        return HTTP_STATUS_BY_CODE[self.code]


class InvalidArgumentError(DomainError):
    """Raised when a path parameter is malformed."""

    def __init__(self, message: str = "Invalid id") -> None:
        super().__init__(code=ErrorCode.INVALID_ARGUMENT, message=message)


class UnprocessableInputError(DomainError):
    """Raised when a payload fails structural validation."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.UNPROCESSABLE_INPUT, message=message)


class NotFoundError(DomainError):
    """Raised when a referenced event or ticket does not exist."""

    def __init__(self, resource: str) -> None:
        super().__init__(code=ErrorCode.NOT_FOUND, message=f"{resource} not found")


class ConflictError(DomainError):
    """Raised when a name or code is already taken."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.CONFLICT, message=message)


class ForbiddenError(DomainError):
    """Raised when a business rule refuses the operation."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.FORBIDDEN, message=message)
