from dataclasses import dataclass

from booking_desk.booking.domain.entity import Booking
from booking_desk.booking.domain.event import (
    BookingCancelled,
    BookingConfirmed,
    BookingStatusChanged,
)
from booking_desk.flight.applications.notify_flight import FlightNotificationService
from booking_desk.flight.domain.exception import FlightNotFoundException
from booking_desk.flight.domain.repository import FlightRepository
from booking_desk.passenger.domain.entity import Passenger
from booking_desk.passenger.domain.exception import PassengerNotFoundException
from booking_desk.passenger.domain.repository import PassengerRepository


@dataclass(frozen=True)
class Broadcast:
    """1回の一斉通知の結果"""

    message: str
    recipients: list[Passenger]


@dataclass(frozen=True)
class BookingResult:
    """予約操作の結果と、その操作で発生した通知"""

    booking: Booking
    broadcasts: list[Broadcast]


class BookingNotifier:
    """予約のドメインイベントをフライトの一斉通知に変換する

    通知は予約した乗客宛ての文面だが、配信先はフライトの購読者全員。
    """

    def __init__(
        self,
        flight_repository: FlightRepository,
        passenger_repository: PassengerRepository,
        notification_service: FlightNotificationService,
    ) -> None:
        self._flight_repository = flight_repository
        self._passenger_repository = passenger_repository
        self._notification_service = notification_service

    def publish(self, booking: Booking) -> list[Broadcast]:
        """予約に溜まったイベントを取り出し、1イベントにつき1回通知する"""
        broadcasts: list[Broadcast] = []
        for event in booking.flush_domain_events():
            message = self._to_message(booking, event)
            recipients = self._notification_service.notify(
                booking.flight_number, message
            )
            broadcasts.append(Broadcast(message=message, recipients=recipients))
        return broadcasts

    def _to_message(self, booking: Booking, event: object) -> str:
        flight = self._flight_repository.find_by_id(booking.flight_number)
        if flight is None:
            raise FlightNotFoundException(booking.flight_number)
        passenger = self._passenger_repository.find_by_id(booking.passenger_id)
        if passenger is None:
            raise PassengerNotFoundException(booking.passenger_id)

        route = f"flight {flight.origin} to {flight.destination}"
        if isinstance(event, BookingConfirmed):
            return f"Booking confirmed for {route} for passenger {passenger.name}"
        if isinstance(event, BookingCancelled):
            return f"Booking cancelled for {route} for passenger {passenger.name}"
        if isinstance(event, BookingStatusChanged):
            return (
                f"Booking status changed for {route} for passenger "
                f"{passenger.name} to {event.current.value}"
            )
        raise TypeError(f"Unsupported booking event: {type(event).__name__}")
