from booking_desk.shared.domain import ResourceNotFoundException


class FlightNotFoundException(ResourceNotFoundException):
    """フライト番号に一致するフライトがない場合"""

    def __init__(self, flight_number: object) -> None:
        super().__init__(f"Flight not found: {flight_number}")
        self.flight_number = flight_number
