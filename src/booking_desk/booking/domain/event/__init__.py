from .booking_events import BookingCancelled, BookingConfirmed, BookingStatusChanged

__all__ = ["BookingConfirmed", "BookingCancelled", "BookingStatusChanged"]
