"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from typing import Self

MAX_SEATS = 1000


@dataclass(frozen=True)
class WebinarId:
    """Opaque unique identifier for a Webinar."""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("Webinar ID cannot be empty")

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class UserId:
    """Unique identifier for a User."""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("User ID cannot be empty")

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=value.strip())

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Seats:
    """Non-negative integer representing a webinar's seat capacity."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Seats cannot be negative")

    def exceeds_maximum(self) -> bool:
        return self.value > MAX_SEATS
