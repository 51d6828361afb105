"""Pytest configuration and shared fixtures."""

from datetime import datetime, timezone

import pytest
from rest_framework.test import APIClient

from webinars.domain import Seats, User, UserId, Webinar, WebinarId
from webinars.stores import InMemoryWebinarStore


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def reset_container():
    from webinars.container import container
    container.reset()
    yield
    container.reset()


@pytest.fixture
def alice() -> User:
    return User(id=UserId("alice"), email="alice@gmail.com")


@pytest.fixture
def bob() -> User:
    return User(id=UserId("bob"), email="bob@gmail.com")


@pytest.fixture
def make_webinar(alice: User):
    def _make(
        webinar_id: str = "webinar-id",
        organizer_id: UserId | None = None,
        seats: int = 100,
    ) -> Webinar:
        return Webinar(
            id=WebinarId(webinar_id),
            organizer_id=organizer_id or alice.id,
            title="Webinar title",
            start_date=datetime(2024, 1, 1, 0, 0, tzinfo=timezone.utc),
            end_date=datetime(2024, 1, 1, 1, 0, tzinfo=timezone.utc),
            seats=Seats(seats),
        )

    return _make


@pytest.fixture
def webinar(make_webinar) -> Webinar:
    return make_webinar()


@pytest.fixture
def store(webinar: Webinar) -> InMemoryWebinarStore:
    return InMemoryWebinarStore([webinar])
