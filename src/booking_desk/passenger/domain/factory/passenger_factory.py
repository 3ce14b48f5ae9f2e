from typing import TypedDict

from booking_desk.passenger.domain.entity import Passenger
from booking_desk.passenger.domain.value_object import PassportNumber


class PassengerDetails(TypedDict):
    """乗客情報の入力データ"""

    name: str
    email: str
    phone_number: str
    passport_number: str


class PassengerFactory:
    """乗客エンティティのファクトリ"""

    def create(self, passenger_details: PassengerDetails) -> Passenger:
        return Passenger(
            id=PassportNumber(passenger_details["passport_number"]),
            name=passenger_details["name"],
            email=passenger_details["email"],
            phone_number=passenger_details["phone_number"],
        )
