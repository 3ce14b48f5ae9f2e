from booking_desk.passenger.domain.entity import Passenger
from booking_desk.passenger.domain.factory import PassengerDetails, PassengerFactory
from booking_desk.passenger.domain.repository import PassengerRepository
from booking_desk.shared.utils import get_logger

logger = get_logger("passenger")


class RegisterPassengerService:
    """乗客登録サービス"""

    def __init__(
        self, repository: PassengerRepository, factory: PassengerFactory
    ) -> None:
        self._repository = repository
        self._factory = factory

    def register(self, passenger_details: PassengerDetails) -> Passenger:
        """乗客を登録する（旅券番号が重複していれば DuplicateResourceException）"""
        passenger = self._factory.create(passenger_details)
        self._repository.add(passenger)
        logger.info(
            "Passenger registered",
            extra={"passport_number": str(passenger.passport_number)},
        )
        return passenger
