"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from webinars.domain import Webinar, WebinarId


class WebinarStore(ABC):
    """Interface for webinar persistence operations."""

    @abstractmethod
    def find_by_id(self, webinar_id: WebinarId) -> Webinar | None:
        """Return a webinar by ID, or None if not found."""
        ...

    @abstractmethod
    def create(self, webinar: Webinar) -> None:
        """Persist a new webinar. Fails if the ID is already taken."""
        ...

    @abstractmethod
    def update(self, webinar: Webinar) -> None:
        """Persist the full state of an existing webinar, keyed by its ID.

        Fails if the webinar no longer exists.
        """
        ...
