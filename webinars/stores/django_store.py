"""Django ORM implementation of the WebinarStore."""

from webinars import models
from webinars.domain import Seats, UserId, Webinar, WebinarId
from webinars.stores.interfaces import WebinarStore


class DjangoWebinarStore(WebinarStore):
    """Relational webinar store using Django ORM.

    Database errors (IntegrityError on duplicate IDs, connection failures)
    propagate unchanged.
    """

    def find_by_id(self, webinar_id: WebinarId) -> Webinar | None:
        record = models.Webinar.objects.filter(pk=webinar_id.value).first()
        if record is None:
            return None
        return self._to_domain(record)

    def create(self, webinar: Webinar) -> None:
        models.Webinar.objects.create(
            id=webinar.id.value,
            **self._fields(webinar),
        )

    def update(self, webinar: Webinar) -> None:
        updated = models.Webinar.objects.filter(pk=webinar.id.value).update(
            **self._fields(webinar)
        )
        if updated == 0:
            raise models.Webinar.DoesNotExist(
                f"Webinar {webinar.id} does not exist"
            )

    @staticmethod
    def _fields(webinar: Webinar) -> dict:
        return {
            "organizer_id": webinar.organizer_id.value,
            "title": webinar.title,
            "start_date": webinar.start_date,
            "end_date": webinar.end_date,
            "seats": webinar.seats.value,
        }

    @staticmethod
    def _to_domain(record: models.Webinar) -> Webinar:
        return Webinar(
            id=WebinarId(record.id),
            organizer_id=UserId(record.organizer_id),
            title=record.title,
            start_date=record.start_date,
            end_date=record.end_date,
            seats=Seats(record.seats),
        )
