from booking_desk.shared.domain import ResourceNotFoundException


class PassengerNotFoundException(ResourceNotFoundException):
    """旅券番号に一致する乗客がいない場合"""

    def __init__(self, passport_number: object) -> None:
        super().__init__(f"Passenger not found: {passport_number}")
        self.passport_number = passport_number
