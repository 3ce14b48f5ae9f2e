from typing import Callable

from pydantic import ValidationError

from booking_desk.booking.applications.booking_notifier import Broadcast
from booking_desk.booking.domain.factory import BookingDetails
from booking_desk.booking.domain.value_object import BookingId
from booking_desk.desk.handlers.request_models import (
    BookFlightRequest,
    CancelBookingRequest,
    FlightLookupRequest,
    ModifyPassengerRequest,
    PassportLookupRequest,
    RegisterPassengerRequest,
)
from booking_desk.desk.session import DeskSession
from booking_desk.flight.domain.entity import Flight
from booking_desk.flight.domain.enum import FlightType
from booking_desk.flight.domain.value_object import FlightNumber
from booking_desk.passenger.applications.modify_passenger import ContactField
from booking_desk.passenger.domain.factory import PassengerDetails
from booking_desk.passenger.domain.value_object import PassportNumber
from booking_desk.shared.domain import DomainException
from booking_desk.shared.utils import get_logger

logger = get_logger("desk")

Reader = Callable[[str], str]
Writer = Callable[[str], None]

MENU = """Menu:
1. Display Itinerary
2. Display Schedule
3. Display Passengers by Flight Type
4. Modify Passenger Information
5. Notify Passengers
6. Add New Passenger
7. Book New Flight for a Passenger
8. Cancel Booking
9. View Specific Passenger's Details
10. View Flight Details
11. Exit"""

EXIT_CHOICE = "11"

_FLIGHT_TYPE_HEADINGS: dict[FlightType, str] = {
    FlightType.DOMESTIC: "Passengers on Domestic Flights:",
    FlightType.INTERNATIONAL: "Passengers on International Flights:",
}


def show_itinerary(session: DeskSession, read: Reader, write: Writer) -> None:
    write(f"Itinerary ID: {session.itinerary_id}")
    for entry in session.view_itinerary.entries(session.itinerary_id):
        write(entry.booking.info())
        write(entry.flight.info())


def show_schedule(session: DeskSession, read: Reader, write: Writer) -> None:
    schedule = session.flight_lookup.get_schedule(session.schedule_id)
    write(f"Schedule ID: {schedule.id}, Date: {schedule.date}")
    for flight in session.flight_lookup.list_flights(session.schedule_id):
        write(flight.info())


def show_passengers_by_flight_type(
    session: DeskSession, read: Reader, write: Writer
) -> None:
    grouped = session.list_passengers.by_flight_type(session.schedule_id)
    for flight_type, manifests in grouped.items():
        write(_FLIGHT_TYPE_HEADINGS[flight_type])
        for manifest in manifests:
            write(f"Passengers on flight {manifest.flight.flight_number}:")
            for passenger in manifest.passengers:
                write(passenger.info())


def modify_passenger(session: DeskSession, read: Reader, write: Writer) -> None:
    passport_number = read("Enter passport number of the passenger to modify: ")
    passenger = session.find_passenger.find(PassportNumber(passport_number))

    write(f"Modify Passenger Information for {passenger.name}")
    write("1. Email")
    write("2. Phone Number")
    choice = read("Enter your choice: ").strip()
    contact_fields = {"1": ContactField.EMAIL, "2": ContactField.PHONE_NUMBER}
    if choice not in contact_fields:
        write("Invalid choice")
        return

    contact_field = contact_fields[choice]
    label = "email" if contact_field == ContactField.EMAIL else "phone number"
    request = ModifyPassengerRequest(
        passport_number=passport_number,
        contact_field=contact_field,
        value=read(f"Enter new {label}: ").strip(),
    )
    session.modify_passenger.modify(
        PassportNumber(request.passport_number), request.contact_field, request.value
    )
    write("Passenger information updated.")


def notify_passengers(session: DeskSession, read: Reader, write: Writer) -> None:
    for flight_number in session.settings.notice_flights:
        flight = session.flight_lookup.find(
            session.schedule_id, FlightNumber(flight_number)
        )
        recipients = session.notifications.notify(
            flight.flight_number, flight.flight_type.default_notice
        )
        _write_broadcast(
            Broadcast(message=flight.flight_type.default_notice, recipients=recipients),
            write,
        )


def add_passenger(session: DeskSession, read: Reader, write: Writer) -> None:
    write("Enter passenger details:")
    request = RegisterPassengerRequest(
        name=read("Name: ").strip(),
        email=read("Email: ").strip(),
        phone_number=read("Phone Number: ").strip(),
        passport_number=read("Passport Number: ").strip(),
    )
    passenger_details: PassengerDetails = {
        "name": request.name,
        "email": request.email,
        "phone_number": request.phone_number,
        "passport_number": request.passport_number,
    }
    session.register_passenger.register(passenger_details)
    write("Passenger added successfully!")


def book_flight(session: DeskSession, read: Reader, write: Writer) -> None:
    passport_number = read(
        "Enter passport number of the passenger to book flight for: "
    )
    passenger = session.find_passenger.find(PassportNumber(passport_number))

    # 座席・予約IDを聞く前にフライトの存在を確認する
    flight_number = FlightNumber(read("Enter flight number: "))
    session.flight_lookup.find(session.schedule_id, flight_number)

    request = BookFlightRequest(
        passport_number=str(passenger.passport_number),
        flight_number=str(flight_number),
        seat_number=read("Enter seat number: ").strip(),
        booking_id=read("Enter booking ID: ").strip(),
    )
    booking_details: BookingDetails = {
        "booking_id": request.booking_id,
        "seat_number": request.seat_number,
    }
    result = session.book_flight.book(
        schedule_id=session.schedule_id,
        itinerary_id=session.itinerary_id,
        passenger_id=PassportNumber(request.passport_number),
        flight_number=FlightNumber(request.flight_number),
        booking_details=booking_details,
    )
    for broadcast in result.broadcasts:
        _write_broadcast(broadcast, write)
    write("Flight booked successfully!")


def cancel_booking(session: DeskSession, read: Reader, write: Writer) -> None:
    request = CancelBookingRequest(booking_id=read("Enter booking ID to cancel: "))
    result = session.cancel_booking.cancel(BookingId(request.booking_id))
    for broadcast in result.broadcasts:
        _write_broadcast(broadcast, write)
    write("Booking cancelled successfully!")


def view_passenger(session: DeskSession, read: Reader, write: Writer) -> None:
    request = PassportLookupRequest(passport_number=read("Enter passport number: "))
    passenger = session.find_passenger.find(PassportNumber(request.passport_number))
    write(passenger.info())


def view_flight(session: DeskSession, read: Reader, write: Writer) -> None:
    request = FlightLookupRequest(flight_number=read("Enter flight number: ").strip())
    flight = session.flight_lookup.find(
        session.schedule_id, FlightNumber(request.flight_number)
    )
    write(flight.info())
    write(_flight_summary(flight))


_ACTIONS: dict[str, Callable[[DeskSession, Reader, Writer], None]] = {
    "1": show_itinerary,
    "2": show_schedule,
    "3": show_passengers_by_flight_type,
    "4": modify_passenger,
    "5": notify_passengers,
    "6": add_passenger,
    "7": book_flight,
    "8": cancel_booking,
    "9": view_passenger,
    "10": view_flight,
}


def run_menu(session: DeskSession, read: Reader = input, write: Writer = print) -> int:
    """メニューを繰り返し表示し、選択された操作を実行する

    操作の失敗（ドメイン例外・入力検証エラー）は表示してメニューに戻る。
    入力の終端（EOF）は終了として扱う。

    Returns:
        int: 終了コード（通常終了は 0）
    """
    while True:
        write(MENU)
        try:
            choice = read("Enter your choice: ").strip()
        except EOFError:
            write("Exiting...")
            return 0

        if choice == EXIT_CHOICE:
            write("Exiting...")
            return 0

        action = _ACTIONS.get(choice)
        if action is None:
            logger.debug("Invalid menu choice", extra={"choice": choice})
            write("Invalid choice. Please try again.")
            continue

        try:
            action(session, read, write)
        except EOFError:
            write("Exiting...")
            return 0
        except ValidationError as e:
            logger.warning(
                "Invalid operator input",
                extra={"choice": choice, "errors": e.error_count()},
            )
            write(f"Invalid input: {_describe_validation_error(e)}")
        except DomainException as e:
            logger.warning(
                "Operation failed",
                extra={"choice": choice, "error_type": type(e).__name__},
            )
            write(str(e))
        except ValueError as e:
            logger.warning("Invalid value", extra={"choice": choice, "error": str(e)})
            write(f"Invalid input: {e}")


def _write_broadcast(broadcast: Broadcast, write: Writer) -> None:
    for passenger in broadcast.recipients:
        write(f"Passenger {passenger.name} received update: {broadcast.message}")


def _flight_summary(flight: Flight) -> str:
    available = "Yes" if flight.check_availability() else "No"
    return (
        f"Type: {flight.flight_type.value}, Fare: {flight.calculate_fare()}, "
        f"Available: {available}"
    )


def _describe_validation_error(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(loc) for loc in detail['loc'])}: {detail['msg']}"
        for detail in error.errors()
    )
