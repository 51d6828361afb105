"""In-memory implementation of the WebinarStore, used by tests and scripts."""

from collections.abc import Iterable
from dataclasses import replace

from webinars.domain import Webinar, WebinarId
from webinars.stores.interfaces import WebinarStore


class InMemoryWebinarStore(WebinarStore):
    """Dict-backed store holding copies of the webinars it is given.

    Entities handed out by find_by_id are copies, so mutating one does not
    change stored state until update() is called.
    """

    def __init__(self, webinars: Iterable[Webinar] = ()) -> None:
        self._webinars: dict[WebinarId, Webinar] = {
            webinar.id: replace(webinar) for webinar in webinars
        }

    def find_by_id(self, webinar_id: WebinarId) -> Webinar | None:
        webinar = self._webinars.get(webinar_id)
        return replace(webinar) if webinar is not None else None

    def create(self, webinar: Webinar) -> None:
        if webinar.id in self._webinars:
            raise ValueError(f"Webinar {webinar.id} already exists")
        self._webinars[webinar.id] = replace(webinar)

    def update(self, webinar: Webinar) -> None:
        if webinar.id not in self._webinars:
            raise KeyError(webinar.id)
        self._webinars[webinar.id] = replace(webinar)

    def __len__(self) -> int:
        return len(self._webinars)
