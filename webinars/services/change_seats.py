"""ChangeSeats service - raises a webinar's seat capacity.

The service talks to storage only through WebinarStore and reports the
outcome as a Result: Ok with the updated webinar, or Err with the domain
error of the first check that failed.

Checks run in a fixed order (existence, ownership, decrease, maximum) and
the first failing one ends the request before anything is written. Store
errors are not caught.
"""

import logging
from dataclasses import dataclass

from webinars.domain import Err, Ok, Result, Seats, User, Webinar, WebinarId
from webinars.domain.errors import (
    DomainError,
    WebinarNotFoundError,
    WebinarNotOrganizerError,
    WebinarReduceSeatsError,
    WebinarTooManySeatsError,
)
from webinars.stores.interfaces import WebinarStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChangeSeatsInput:
    """Request to change the seats of a webinar on behalf of a user."""

    user: User
    webinar_id: str
    seats: int


class ChangeSeats:
    """Use case for changing the seat capacity of a webinar."""

    def __init__(self, store: WebinarStore) -> None:
        self._store = store

    def execute(self, data: ChangeSeatsInput) -> Result[Webinar, DomainError]:
        """Change the seats of a webinar.

        Returns:
            Ok with the updated webinar, or Err with one of
            WebinarNotFoundError, WebinarNotOrganizerError,
            WebinarReduceSeatsError, WebinarTooManySeatsError.
        """
        try:
            webinar_id = WebinarId.from_string(data.webinar_id)
        except ValueError:
            return self._reject(WebinarNotFoundError(data.webinar_id))

        webinar = self._store.find_by_id(webinar_id)
        if webinar is None:
            return self._reject(WebinarNotFoundError(data.webinar_id))

        if not webinar.is_organizer(data.user):
            return self._reject(
                WebinarNotOrganizerError(data.webinar_id, data.user.id.value)
            )

        current = webinar.seats.value
        if data.seats <= current:
            return self._reject(WebinarReduceSeatsError(current, data.seats))

        seats = Seats(data.seats)
        if seats.exceeds_maximum():
            return self._reject(WebinarTooManySeatsError(data.seats))

        webinar.update_seats(seats)
        self._store.update(webinar)
        logger.info(
            "Webinar %s seats changed from %d to %d", webinar.id, current, seats.value
        )
        return Ok(webinar)

    @staticmethod
    def _reject(error: DomainError) -> Err[DomainError]:
        logger.info("Seat change rejected: %s", error)
        return Err(error)
