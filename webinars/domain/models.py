"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in webinars/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime

from webinars.domain.value_objects import Seats, UserId, WebinarId


@dataclass(frozen=True)
class User:
    """Identity of the user acting on a webinar."""

    id: UserId
    email: str


@dataclass
class Webinar:
    """Domain representation of a Webinar.

    Only the seat capacity may change after construction, through
    update_seats(). Business rules for that change live in the
    ChangeSeats service.
    """

    id: WebinarId
    organizer_id: UserId
    title: str
    start_date: datetime
    end_date: datetime
    seats: Seats

    def update_seats(self, seats: Seats) -> None:
        self.seats = seats

    def is_organizer(self, user: User) -> bool:
        return self.organizer_id == user.id
