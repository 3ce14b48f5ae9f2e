from booking_desk.flight.domain.entity import Flight
from booking_desk.flight.domain.repository import FlightRepository
from booking_desk.flight.domain.value_object import FlightNumber
from booking_desk.shared.infrastructure import InMemoryStore


class InMemoryFlightRepository(FlightRepository):
    """プロセス内メモリを使用した FlightRepository の具象実装"""

    def __init__(self) -> None:
        self._store: InMemoryStore[Flight, FlightNumber] = InMemoryStore("Flight")

    def add(self, flight: Flight) -> None:
        self._store.add(flight)

    def save(self, flight: Flight) -> None:
        self._store.put(flight)

    def find_by_id(self, flight_number: FlightNumber) -> Flight | None:
        return self._store.get(flight_number)

    def find_all(self) -> list[Flight]:
        return self._store.values()

    def delete(self, flight_number: FlightNumber) -> None:
        self._store.remove(flight_number)
