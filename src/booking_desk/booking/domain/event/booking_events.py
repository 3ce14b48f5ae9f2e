from dataclasses import dataclass

from booking_desk.booking.domain.enum import BookingStatus
from booking_desk.booking.domain.value_object import BookingId


@dataclass(frozen=True)
class BookingConfirmed:
    booking_id: BookingId


@dataclass(frozen=True)
class BookingCancelled:
    booking_id: BookingId


@dataclass(frozen=True)
class BookingStatusChanged:
    """change_status による汎用遷移"""

    booking_id: BookingId
    previous: BookingStatus
    current: BookingStatus
