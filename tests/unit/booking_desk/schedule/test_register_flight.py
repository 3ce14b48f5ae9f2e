import pytest

from booking_desk.flight.domain.factory import FlightDetails
from booking_desk.flight.domain.value_object import FlightNumber
from booking_desk.shared.domain.exception import (
    BusinessRuleViolationException,
    DuplicateResourceException,
)


class TestRegisterFlightService:
    @pytest.fixture
    def flight_details(self) -> FlightDetails:
        return {
            "flight_number": "FL789",
            "origin": "Chicago",
            "destination": "Toronto",
            "departure_time": "2023-06-15 08:00",
            "arrival_time": "2023-06-15 10:30",
        }

    def test_register_adds_flight_to_schedule(self, empty_session, flight_details):
        flight = empty_session.register_flight.register(
            empty_session.schedule_id, "International", flight_details
        )

        assert empty_session.flights.find_by_id(FlightNumber("FL789")) is flight
        schedule = empty_session.schedules.find_by_id(empty_session.schedule_id)
        assert schedule.flight_numbers == (FlightNumber("FL789"),)

    def test_unknown_flight_type_is_rejected(self, empty_session, flight_details):
        with pytest.raises(BusinessRuleViolationException, match="Charter"):
            empty_session.register_flight.register(
                empty_session.schedule_id, "Charter", flight_details
            )

        assert empty_session.flights.find_all() == []

    def test_duplicate_flight_number_is_rejected(self, session, flight_details):
        with pytest.raises(DuplicateResourceException, match="FL123"):
            session.register_flight.register(
                session.schedule_id,
                "Domestic",
                {**flight_details, "flight_number": "FL123"},
            )

        flight = session.flights.find_by_id(FlightNumber("FL123"))
        assert flight.destination == "Los Angeles"
