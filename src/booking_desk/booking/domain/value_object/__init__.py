from .booking_id import BookingId
from .seat_number import SeatNumber

__all__ = ["BookingId", "SeatNumber"]
