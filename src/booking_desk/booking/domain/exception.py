from booking_desk.shared.domain import ResourceNotFoundException


class BookingNotFoundException(ResourceNotFoundException):
    """予約IDに一致する有効な予約がない場合"""

    def __init__(self, booking_id: object) -> None:
        super().__init__(f"Booking not found: {booking_id}")
        self.booking_id = booking_id
