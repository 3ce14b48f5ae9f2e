from booking_desk.flight.domain.value_object import FlightNumber
from booking_desk.schedule.domain.value_object import ScheduleDate, ScheduleId
from booking_desk.shared.domain import AggregateRoot
from booking_desk.shared.domain.exception import DuplicateResourceException


class Schedule(AggregateRoot[ScheduleId]):
    """運航スケジュール（指定日のフライト一覧）

    フライトはフライト番号で保持する。同じ番号は1つのスケジュールに1便のみ。
    """

    def __init__(
        self,
        id: ScheduleId,
        date: ScheduleDate,
        flight_numbers: list[FlightNumber] | None = None,
    ) -> None:
        super().__init__(id)
        self._date = date
        self._flight_numbers: list[FlightNumber] = []
        for flight_number in flight_numbers or []:
            self.add_flight(flight_number)

    @property
    def date(self) -> ScheduleDate:
        return self._date

    @property
    def flight_numbers(self) -> tuple[FlightNumber, ...]:
        return tuple(self._flight_numbers)

    def add_flight(self, flight_number: FlightNumber) -> None:
        if flight_number in self._flight_numbers:
            raise DuplicateResourceException(
                f"Flight {flight_number} is already in schedule {self.id}"
            )
        self._flight_numbers.append(flight_number)

    def remove_flight(self, flight_number: FlightNumber) -> None:
        """一致するフライト番号をすべて取り除く"""
        self._flight_numbers = [f for f in self._flight_numbers if f != flight_number]

    def contains(self, flight_number: FlightNumber) -> bool:
        return flight_number in self._flight_numbers
