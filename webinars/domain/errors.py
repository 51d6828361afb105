"""Domain error codes for the webinars module."""

from dataclasses import dataclass
from enum import Enum

from webinars.domain.value_objects import MAX_SEATS


class ErrorCode(Enum):
    """Domain error codes."""

    WEBINAR_NOT_FOUND = "WEBINAR_NOT_FOUND"
    WEBINAR_NOT_ORGANIZER = "WEBINAR_NOT_ORGANIZER"
    WEBINAR_REDUCE_SEATS = "WEBINAR_REDUCE_SEATS"
    WEBINAR_TOO_MANY_SEATS = "WEBINAR_TOO_MANY_SEATS"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class WebinarNotFoundError(DomainError):
    """Raised when a webinar is not found."""

    def __init__(self, webinar_id: str) -> None:
        super().__init__(
            code=ErrorCode.WEBINAR_NOT_FOUND,
            message="Webinar not found",
        )
        self.webinar_id = webinar_id


class WebinarNotOrganizerError(DomainError):
    """Raised when the acting user does not organize the webinar."""

    def __init__(self, webinar_id: str, user_id: str) -> None:
        super().__init__(
            code=ErrorCode.WEBINAR_NOT_ORGANIZER,
            message="User is not allowed to update this webinar",
        )
        self.webinar_id = webinar_id
        self.user_id = user_id


class WebinarReduceSeatsError(DomainError):
    """Raised when the requested seats do not exceed the current seats."""

    def __init__(self, current: int, requested: int) -> None:
        super().__init__(
            code=ErrorCode.WEBINAR_REDUCE_SEATS,
            message="You cannot reduce the number of seats",
        )
        self.current = current
        self.requested = requested


class WebinarTooManySeatsError(DomainError):
    """Raised when the requested seats exceed the maximum."""

    def __init__(self, requested: int) -> None:
        super().__init__(
            code=ErrorCode.WEBINAR_TOO_MANY_SEATS,
            message=f"Webinar must have at most {MAX_SEATS} seats",
        )
        self.requested = requested
