from booking_desk.booking.domain.entity import Booking
from booking_desk.booking.domain.enum import BookingStatus
from booking_desk.booking.domain.value_object import BookingId, SeatNumber
from booking_desk.desk.session import DeskSession
from booking_desk.flight.domain.factory import FlightDetails
from booking_desk.flight.domain.value_object import FlightNumber
from booking_desk.passenger.domain.factory import PassengerDetails
from booking_desk.passenger.domain.value_object import PassportNumber
from booking_desk.shared.utils import get_logger

logger = get_logger("desk")

SEED_PASSENGERS: list[PassengerDetails] = [
    {
        "name": "John Doe",
        "email": "john@example.com",
        "phone_number": "1234567890",
        "passport_number": "P12345",
    },
    {
        "name": "Jane Smith",
        "email": "jane@example.com",
        "phone_number": "0987654321",
        "passport_number": "P54321",
    },
]

SEED_FLIGHTS: list[tuple[str, FlightDetails]] = [
    (
        "Domestic",
        {
            "flight_number": "FL123",
            "origin": "New York",
            "destination": "Los Angeles",
            "departure_time": "2023-06-15 10:00",
            "arrival_time": "2023-06-15 14:00",
        },
    ),
    (
        "International",
        {
            "flight_number": "FL456",
            "origin": "New York",
            "destination": "London",
            "departure_time": "2023-06-16 18:00",
            "arrival_time": "2023-06-17 06:00",
        },
    ),
]

# (booking_id, passport_number, flight_number, seat_number)
SEED_BOOKINGS: list[tuple[str, str, str, str]] = [
    ("B123", "P12345", "FL123", "12A"),
    ("B456", "P54321", "FL456", "14B"),
]


def seed_session(session: DeskSession) -> None:
    """起動時の初期データを投入する

    初期予約は確定済みとして登録し、確定通知は送らない。
    """
    for passenger_details in SEED_PASSENGERS:
        session.register_passenger.register(passenger_details)

    for flight_type, flight_details in SEED_FLIGHTS:
        session.register_flight.register(
            session.schedule_id, flight_type, flight_details
        )

    itinerary = session.view_itinerary.get(session.itinerary_id)
    for booking_id, passport_number, flight_number, seat_number in SEED_BOOKINGS:
        passenger = session.find_passenger.find(PassportNumber(passport_number))
        flight = session.flight_lookup.find(
            session.schedule_id, FlightNumber(flight_number)
        )
        booking = Booking(
            id=BookingId(booking_id),
            passenger_id=passenger.passport_number,
            flight_number=flight.flight_number,
            seat_number=SeatNumber(seat_number),
            status=BookingStatus.CONFIRMED,
        )
        session.bookings.add(booking)
        session.notifications.subscribe(flight.flight_number, passenger.passport_number)
        itinerary.add_booking(booking.id)
    session.itineraries.save(itinerary)

    logger.info(
        "Session seeded",
        extra={
            "passengers": len(session.passengers.find_all()),
            "flights": len(session.flights.find_all()),
            "bookings": len(session.bookings.find_all()),
        },
    )
