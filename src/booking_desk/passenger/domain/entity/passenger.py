from booking_desk.passenger.domain.value_object import PassportNumber
from booking_desk.shared.domain import AggregateRoot


class Passenger(AggregateRoot[PassportNumber]):
    """乗客

    旅券番号で同一性を判定する。フライトからの通知を受け取る購読者でもある。
    """

    def __init__(
        self,
        id: PassportNumber,
        name: str,
        email: str,
        phone_number: str,
    ) -> None:
        super().__init__(id)
        self._name = name
        self._email = email
        self._phone_number = phone_number
        self._notifications: list[str] = []

    @property
    def passport_number(self) -> PassportNumber:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> str:
        return self._email

    @property
    def phone_number(self) -> str:
        return self._phone_number

    @property
    def notifications(self) -> tuple[str, ...]:
        """受信した通知（受信順）"""
        return tuple(self._notifications)

    def change_email(self, email: str) -> None:
        self._email = email

    def change_phone_number(self, phone_number: str) -> None:
        self._phone_number = phone_number

    def update(self, message: str) -> None:
        """フライトからの通知を受け取る"""
        self._notifications.append(message)

    def info(self) -> str:
        return (
            f"Name: {self._name}, Email: {self._email}, "
            f"Phone Number: {self._phone_number}\n"
            f"Passport Number: {self.id}"
        )
