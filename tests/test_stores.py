"""Tests for WebinarStore implementations.

Run with: pytest tests/test_stores.py -v
"""

from datetime import datetime, timezone

import pytest
from django.db import IntegrityError

from webinars import models
from webinars.domain import Seats, UserId, Webinar, WebinarId
from webinars.stores import InMemoryWebinarStore
from webinars.stores.django_store import DjangoWebinarStore


class TestInMemoryWebinarStore:
    """Tests for InMemoryWebinarStore."""

    def test_find_by_id_returns_webinar(self, store, webinar):
        assert store.find_by_id(webinar.id) == webinar

    def test_find_by_id_unknown_returns_none(self, store):
        assert store.find_by_id(WebinarId("unknown")) is None

    def test_returned_entity_is_a_copy(self, store, webinar):
        """Mutating a loaded webinar does not change stored state."""
        loaded = store.find_by_id(webinar.id)
        loaded.update_seats(Seats(500))

        assert store.find_by_id(webinar.id).seats == Seats(100)

    def test_create_adds_webinar(self, make_webinar):
        store = InMemoryWebinarStore()

        store.create(make_webinar(webinar_id="new-id"))

        assert len(store) == 1
        assert store.find_by_id(WebinarId("new-id")) is not None

    def test_create_duplicate_raises(self, store, webinar):
        with pytest.raises(ValueError):
            store.create(webinar)

    def test_update_replaces_state(self, store, webinar):
        loaded = store.find_by_id(webinar.id)
        loaded.update_seats(Seats(300))

        store.update(loaded)

        assert store.find_by_id(webinar.id).seats == Seats(300)

    def test_update_unknown_raises(self, make_webinar):
        with pytest.raises(KeyError):
            InMemoryWebinarStore().update(make_webinar())


@pytest.mark.django_db
class TestDjangoWebinarStore:
    """Tests for DjangoWebinarStore against the test database."""

    @pytest.fixture
    def django_store(self) -> DjangoWebinarStore:
        return DjangoWebinarStore()

    def test_create(self, django_store, webinar):
        """create persists every field."""
        django_store.create(webinar)

        record = models.Webinar.objects.get(pk="webinar-id")
        assert record.organizer_id == "alice"
        assert record.title == "Webinar title"
        assert record.start_date == datetime(2024, 1, 1, 0, 0, tzinfo=timezone.utc)
        assert record.end_date == datetime(2024, 1, 1, 1, 0, tzinfo=timezone.utc)
        assert record.seats == 100

    def test_create_duplicate_raises(self, django_store, webinar):
        django_store.create(webinar)

        with pytest.raises(IntegrityError):
            django_store.create(webinar)

    def test_find_by_id_returns_domain_webinar(self, django_store):
        models.Webinar.objects.create(
            id="find-id",
            organizer_id="org-find",
            title="Find webinar",
            start_date=datetime(2022, 2, 1, 0, 0, tzinfo=timezone.utc),
            end_date=datetime(2022, 2, 1, 1, 0, tzinfo=timezone.utc),
            seats=5,
        )

        found = django_store.find_by_id(WebinarId("find-id"))

        assert isinstance(found, Webinar)
        assert found.id == WebinarId("find-id")
        assert found.organizer_id == UserId("org-find")
        assert found.title == "Find webinar"
        assert found.seats == Seats(5)

    def test_find_by_id_unknown_returns_none(self, django_store):
        assert django_store.find_by_id(WebinarId("missing")) is None

    def test_update(self, django_store, webinar):
        """update writes all domain fields of the existing record."""
        django_store.create(webinar)
        updated = Webinar(
            id=webinar.id,
            organizer_id=webinar.organizer_id,
            title="New title",
            start_date=datetime(2024, 3, 2, 0, 0, tzinfo=timezone.utc),
            end_date=datetime(2024, 3, 2, 1, 0, tzinfo=timezone.utc),
            seats=Seats(30),
        )

        django_store.update(updated)

        record = models.Webinar.objects.get(pk="webinar-id")
        assert record.title == "New title"
        assert record.seats == 30
        assert record.start_date == datetime(2024, 3, 2, 0, 0, tzinfo=timezone.utc)

    def test_update_missing_raises(self, django_store, webinar):
        with pytest.raises(models.Webinar.DoesNotExist):
            django_store.update(webinar)
