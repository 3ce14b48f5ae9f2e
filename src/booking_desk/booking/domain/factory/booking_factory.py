from typing import TypedDict

from booking_desk.booking.domain.entity import Booking
from booking_desk.booking.domain.enum import BookingStatus
from booking_desk.booking.domain.value_object import BookingId, SeatNumber
from booking_desk.flight.domain.value_object import FlightNumber
from booking_desk.passenger.domain.value_object import PassportNumber


class BookingDetails(TypedDict):
    """予約の入力データ構造"""

    booking_id: str
    seat_number: str


class BookingFactory:
    """予約エンティティのファクトリ

    - プリミティブ型から Value Object への変換
    - 初期状態の設定
    """

    def create(
        self,
        passenger_id: PassportNumber,
        flight_number: FlightNumber,
        booking_details: BookingDetails,
    ) -> Booking:
        """新規予約エンティティを生成する

        Returns:
            Booking: 生成された予約エンティティ（PENDING状態）
        """
        return Booking(
            id=BookingId(booking_details["booking_id"]),
            passenger_id=passenger_id,
            flight_number=flight_number,
            seat_number=SeatNumber(booking_details["seat_number"]),
            status=BookingStatus.PENDING,
        )
