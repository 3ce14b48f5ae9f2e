from booking_desk.flight.domain.entity import Flight
from booking_desk.flight.domain.factory import FlightDetails, FlightFactory
from booking_desk.flight.domain.repository import FlightRepository
from booking_desk.schedule.domain.exception import ScheduleNotFoundException
from booking_desk.schedule.domain.repository import ScheduleRepository
from booking_desk.schedule.domain.value_object import ScheduleId
from booking_desk.shared.domain.exception import (
    BusinessRuleViolationException,
    DuplicateResourceException,
)
from booking_desk.shared.utils import get_logger

logger = get_logger("schedule")


class RegisterFlightService:
    """フライトを生成し、スケジュールに登録するサービス"""

    def __init__(
        self,
        schedule_repository: ScheduleRepository,
        flight_repository: FlightRepository,
        factory: FlightFactory,
    ) -> None:
        self._schedule_repository = schedule_repository
        self._flight_repository = flight_repository
        self._factory = factory

    def register(
        self,
        schedule_id: ScheduleId,
        flight_type: str,
        flight_details: FlightDetails,
    ) -> Flight:
        schedule = self._schedule_repository.find_by_id(schedule_id)
        if schedule is None:
            raise ScheduleNotFoundException(schedule_id)

        flight = self._factory.create(flight_type, flight_details)
        if flight is None:
            raise BusinessRuleViolationException(f"Unknown flight type: {flight_type}")

        if schedule.contains(flight.flight_number):
            raise DuplicateResourceException(
                f"Flight {flight.flight_number} is already in schedule {schedule_id}"
            )
        self._flight_repository.add(flight)
        schedule.add_flight(flight.flight_number)
        self._schedule_repository.save(schedule)

        logger.info(
            "Flight registered",
            extra={
                "schedule_id": str(schedule_id),
                "flight_number": str(flight.flight_number),
                "flight_type": flight.flight_type.value,
            },
        )
        return flight
