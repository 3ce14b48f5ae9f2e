import pytest

from booking_desk.booking.domain.entity import Booking
from booking_desk.booking.domain.enum import BookingStatus
from booking_desk.booking.domain.value_object import BookingId, SeatNumber
from booking_desk.flight.domain.value_object import FlightNumber
from booking_desk.passenger.domain.value_object import PassportNumber


@pytest.fixture
def create_booking():
    """Booking を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        status: BookingStatus = BookingStatus.PENDING,
        booking_id: str = "B123",
        passport_number: str = "P12345",
        flight_number: str = "FL123",
        seat_number: str = "12A",
    ) -> Booking:
        return Booking(
            id=BookingId(value=booking_id),
            passenger_id=PassportNumber(value=passport_number),
            flight_number=FlightNumber(value=flight_number),
            seat_number=SeatNumber(value=seat_number),
            status=status,
        )

    return _factory
