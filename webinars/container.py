"""Application container wiring the configured store into the use cases."""

from django.conf import settings
from django.utils.module_loading import import_string

from webinars.services import ChangeSeats
from webinars.stores.interfaces import WebinarStore


class AppContainer:
    """Holds the webinar store and the use cases built on top of it.

    The store class comes from the WEBINARS_STORE setting unless one is
    injected with init().
    """

    def __init__(self) -> None:
        self._store: WebinarStore | None = None
        self._change_seats: ChangeSeats | None = None

    def init(self, store: WebinarStore) -> None:
        self._store = store
        self._change_seats = None

    def reset(self) -> None:
        self._store = None
        self._change_seats = None

    @property
    def store(self) -> WebinarStore:
        if self._store is None:
            store_class = import_string(settings.WEBINARS_STORE)
            self._store = store_class()
        return self._store

    @property
    def change_seats(self) -> ChangeSeats:
        if self._change_seats is None:
            self._change_seats = ChangeSeats(self.store)
        return self._change_seats


container = AppContainer()
