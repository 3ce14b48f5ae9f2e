from booking_desk.flight.domain.entity import Flight
from booking_desk.flight.domain.exception import FlightNotFoundException
from booking_desk.flight.domain.repository import FlightRepository
from booking_desk.flight.domain.value_object import FlightNumber
from booking_desk.schedule.domain.entity import Schedule
from booking_desk.schedule.domain.exception import ScheduleNotFoundException
from booking_desk.schedule.domain.repository import ScheduleRepository
from booking_desk.schedule.domain.value_object import ScheduleId


class FlightLookupService:
    """スケジュール内のフライト検索サービス"""

    def __init__(
        self,
        schedule_repository: ScheduleRepository,
        flight_repository: FlightRepository,
    ) -> None:
        self._schedule_repository = schedule_repository
        self._flight_repository = flight_repository

    def get_schedule(self, schedule_id: ScheduleId) -> Schedule:
        schedule = self._schedule_repository.find_by_id(schedule_id)
        if schedule is None:
            raise ScheduleNotFoundException(schedule_id)
        return schedule

    def find(self, schedule_id: ScheduleId, flight_number: FlightNumber) -> Flight:
        """スケジュール順に走査し、最初に一致したフライトを返す

        Raises:
            FlightNotFoundException: スケジュールに該当するフライトがない場合
        """
        schedule = self.get_schedule(schedule_id)
        for candidate in schedule.flight_numbers:
            if candidate == flight_number:
                flight = self._flight_repository.find_by_id(candidate)
                if flight is not None:
                    return flight
        raise FlightNotFoundException(flight_number)

    def list_flights(self, schedule_id: ScheduleId) -> list[Flight]:
        """スケジュールのフライトを登録順に返す"""
        schedule = self.get_schedule(schedule_id)
        flights: list[Flight] = []
        for flight_number in schedule.flight_numbers:
            flight = self._flight_repository.find_by_id(flight_number)
            if flight is None:
                raise FlightNotFoundException(flight_number)
            flights.append(flight)
        return flights
