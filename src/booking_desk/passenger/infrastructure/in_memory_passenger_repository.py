from booking_desk.passenger.domain.entity import Passenger
from booking_desk.passenger.domain.repository import PassengerRepository
from booking_desk.passenger.domain.value_object import PassportNumber
from booking_desk.shared.infrastructure import InMemoryStore


class InMemoryPassengerRepository(PassengerRepository):
    """プロセス内メモリを使用した PassengerRepository の具象実装"""

    def __init__(self) -> None:
        self._store: InMemoryStore[Passenger, PassportNumber] = InMemoryStore(
            "Passenger"
        )

    def add(self, passenger: Passenger) -> None:
        self._store.add(passenger)

    def save(self, passenger: Passenger) -> None:
        self._store.put(passenger)

    def find_by_id(self, passport_number: PassportNumber) -> Passenger | None:
        return self._store.get(passport_number)

    def find_all(self) -> list[Passenger]:
        return self._store.values()

    def delete(self, passport_number: PassportNumber) -> None:
        self._store.remove(passport_number)
