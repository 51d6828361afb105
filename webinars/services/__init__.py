from webinars.services.change_seats import ChangeSeats, ChangeSeatsInput

__all__ = ["ChangeSeats", "ChangeSeatsInput"]
