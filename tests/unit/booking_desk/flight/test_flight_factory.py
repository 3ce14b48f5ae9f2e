import pytest

from booking_desk.flight.domain.entity import Flight
from booking_desk.flight.domain.enum import FlightType
from booking_desk.flight.domain.factory import FlightDetails, FlightFactory


class TestFlightFactory:
    @pytest.fixture
    def flight_details(self) -> FlightDetails:
        return {
            "flight_number": "FL456",
            "origin": "New York",
            "destination": "London",
            "departure_time": "2023-06-16 18:00",
            "arrival_time": "2023-06-17 06:00",
        }

    @pytest.mark.parametrize(
        "tag, expected",
        [
            ("Domestic", FlightType.DOMESTIC),
            ("International", FlightType.INTERNATIONAL),
            ("INTERNATIONAL", FlightType.INTERNATIONAL),
        ],
    )
    def test_create_by_tag(self, flight_details, tag, expected):
        flight = FlightFactory().create(tag, flight_details)

        assert isinstance(flight, Flight)
        assert flight.flight_type == expected
        assert str(flight.flight_number) == "FL456"
        assert flight.subscribers == ()

    @pytest.mark.parametrize("tag", ["Charter", "", "Domestics"])
    def test_unknown_tag_returns_none(self, flight_details, tag):
        """不明な種別タグでは例外ではなく None を返す"""
        assert FlightFactory().create(tag, flight_details) is None
