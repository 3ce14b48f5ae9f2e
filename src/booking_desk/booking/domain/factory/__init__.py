from .booking_factory import BookingDetails, BookingFactory

__all__ = ["BookingFactory", "BookingDetails"]
