from enum import Enum

from booking_desk.passenger.domain.entity import Passenger
from booking_desk.passenger.domain.exception import PassengerNotFoundException
from booking_desk.passenger.domain.repository import PassengerRepository
from booking_desk.passenger.domain.value_object import PassportNumber
from booking_desk.shared.utils import get_logger

logger = get_logger("passenger")


class ContactField(str, Enum):
    """変更可能な連絡先項目"""

    EMAIL = "email"
    PHONE_NUMBER = "phone_number"


class ModifyPassengerService:
    """乗客の連絡先変更サービス"""

    def __init__(self, repository: PassengerRepository) -> None:
        self._repository = repository

    def modify(
        self, passport_number: PassportNumber, field: ContactField, value: str
    ) -> Passenger:
        passenger = self._repository.find_by_id(passport_number)
        if passenger is None:
            raise PassengerNotFoundException(passport_number)

        if field == ContactField.EMAIL:
            passenger.change_email(value)
        else:
            passenger.change_phone_number(value)
        self._repository.save(passenger)

        logger.info(
            "Passenger contact modified",
            extra={"passport_number": str(passport_number), "field": field.value},
        )
        return passenger
