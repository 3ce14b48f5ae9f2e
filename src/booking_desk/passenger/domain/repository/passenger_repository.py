from booking_desk.passenger.domain.entity import Passenger
from booking_desk.passenger.domain.value_object import PassportNumber
from booking_desk.shared.domain import Repository


class PassengerRepository(Repository[Passenger, PassportNumber]):
    """乗客リポジトリのインターフェース

    旅券番号の一意性は add で保証する。
    """
