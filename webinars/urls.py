from django.urls import path

from webinars.handlers import ChangeSeatsView

urlpatterns = [
    path(
        "webinars/<str:webinar_id>/seats",
        ChangeSeatsView.as_view(),
        name="webinar-change-seats",
    ),
]
