from booking_desk.booking.domain.entity import Booking
from booking_desk.booking.domain.repository import BookingRepository
from booking_desk.booking.domain.value_object import BookingId
from booking_desk.flight.domain.value_object import FlightNumber
from booking_desk.shared.infrastructure import InMemoryStore


class InMemoryBookingRepository(BookingRepository):
    """プロセス内メモリを使用した BookingRepository の具象実装"""

    def __init__(self) -> None:
        self._store: InMemoryStore[Booking, BookingId] = InMemoryStore("Booking")

    def add(self, booking: Booking) -> None:
        self._store.add(booking)

    def save(self, booking: Booking) -> None:
        self._store.put(booking)

    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        return self._store.get(booking_id)

    def find_all(self) -> list[Booking]:
        return self._store.values()

    def find_by_flight_number(self, flight_number: FlightNumber) -> list[Booking]:
        return [b for b in self._store.values() if b.flight_number == flight_number]

    def delete(self, booking_id: BookingId) -> None:
        self._store.remove(booking_id)
