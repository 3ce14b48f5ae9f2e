from booking_desk.booking.domain.value_object import BookingId
from booking_desk.flight.domain.enum import FlightType


class TestListPassengersService:
    def test_grouped_domestic_first(self, session):
        grouped = session.list_passengers.by_flight_type(session.schedule_id)

        assert list(grouped) == [FlightType.DOMESTIC, FlightType.INTERNATIONAL]
        domestic = grouped[FlightType.DOMESTIC]
        international = grouped[FlightType.INTERNATIONAL]
        assert [str(m.flight.flight_number) for m in domestic] == ["FL123"]
        assert [p.name for p in domestic[0].passengers] == ["John Doe"]
        assert [str(m.flight.flight_number) for m in international] == ["FL456"]
        assert [p.name for p in international[0].passengers] == ["Jane Smith"]

    def test_cancelled_booking_is_not_listed(self, session):
        session.cancel_booking.cancel(BookingId("B123"))

        grouped = session.list_passengers.by_flight_type(session.schedule_id)

        assert grouped[FlightType.DOMESTIC][0].passengers == []
