import pytest

from booking_desk.flight.domain.entity import Flight
from booking_desk.flight.domain.enum import FlightType
from booking_desk.flight.domain.value_object import FlightNumber


@pytest.fixture
def create_flight():
    """Flight を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        flight_type: FlightType = FlightType.DOMESTIC,
        flight_number: str = "FL123",
        origin: str = "New York",
        destination: str = "Los Angeles",
        departure_time: str = "2023-06-15 10:00",
        arrival_time: str = "2023-06-15 14:00",
    ) -> Flight:
        return Flight(
            id=FlightNumber(value=flight_number),
            flight_type=flight_type,
            origin=origin,
            destination=destination,
            departure_time=departure_time,
            arrival_time=arrival_time,
        )

    return _factory
