"""Domain error codes for the club events module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    FORBIDDEN = "FORBIDDEN"
    VALIDATION_FAILED = "VALIDATION_FAILED"
    PERSISTENCE_FAILED = "PERSISTENCE_FAILED"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ForbiddenError(DomainError):
    """Raised when the actor is missing or is not a club admin."""

    def __init__(self) -> None:
        super().__init__(code=ErrorCode.FORBIDDEN, message="Forbidden")


class ValidationError(DomainError):
    """Raised when request input is missing or empty."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.VALIDATION_FAILED, message=message)


class PersistenceError(DomainError):
    """Raised when a store operation fails.

    The message is fixed per operation and never carries backend detail.
    """

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.PERSISTENCE_FAILED, message=message)
