from .entity import Booking
from .enum import BookingStatus
from .event import BookingCancelled, BookingConfirmed, BookingStatusChanged
from .exception import BookingNotFoundException
from .factory import BookingDetails, BookingFactory
from .repository import BookingRepository
from .value_object import BookingId, SeatNumber

__all__ = [
    "Booking",
    "BookingId",
    "BookingStatus",
    "SeatNumber",
    "BookingRepository",
    "BookingFactory",
    "BookingDetails",
    "BookingNotFoundException",
    "BookingConfirmed",
    "BookingCancelled",
    "BookingStatusChanged",
]
