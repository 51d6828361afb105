from webinars.domain.models import User, Webinar
from webinars.domain.result import Err, Ok, Result
from webinars.domain.value_objects import MAX_SEATS, Seats, UserId, WebinarId

__all__ = [
    "Webinar",
    "User",
    "WebinarId",
    "UserId",
    "Seats",
    "MAX_SEATS",
    "Ok",
    "Err",
    "Result",
]
