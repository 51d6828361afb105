from webinars.handlers.views import ChangeSeatsView

__all__ = ["ChangeSeatsView"]
