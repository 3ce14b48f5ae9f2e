import pytest

from booking_desk.flight.domain.entity import Flight
from booking_desk.flight.domain.enum import FlightType
from booking_desk.flight.domain.value_object import FlightNumber


@pytest.fixture
def create_flight():
    """スケジュール外のフライトを作る Factory fixture"""

    def _factory(flight_number: str = "FL777") -> Flight:
        return Flight(
            id=FlightNumber(value=flight_number),
            flight_type=FlightType.DOMESTIC,
            origin="Boston",
            destination="Miami",
            departure_time="2023-06-15 07:00",
            arrival_time="2023-06-15 10:00",
        )

    return _factory
