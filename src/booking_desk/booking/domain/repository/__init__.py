from .booking_repository import BookingRepository

__all__ = ["BookingRepository"]
