"""Acting user resolution.

Authentication is not part of this service: every request acts as the user
configured by WEBINARS_ACTING_USER_ID and WEBINARS_ACTING_USER_EMAIL.
"""

from django.conf import settings

from webinars.domain import User, UserId


def get_acting_user() -> User:
    return User(
        id=UserId.from_string(settings.WEBINARS_ACTING_USER_ID),
        email=settings.WEBINARS_ACTING_USER_EMAIL,
    )
