from booking_desk.passenger.domain.entity import Passenger
from booking_desk.passenger.domain.exception import PassengerNotFoundException
from booking_desk.passenger.domain.repository import PassengerRepository
from booking_desk.passenger.domain.value_object import PassportNumber


class FindPassengerService:
    """旅券番号による乗客検索"""

    def __init__(self, repository: PassengerRepository) -> None:
        self._repository = repository

    def find(self, passport_number: PassportNumber) -> Passenger:
        passenger = self._repository.find_by_id(passport_number)
        if passenger is None:
            raise PassengerNotFoundException(passport_number)
        return passenger
