from booking_desk.booking.domain.enum import BookingStatus
from booking_desk.booking.domain.event import (
    BookingCancelled,
    BookingConfirmed,
    BookingStatusChanged,
)
from booking_desk.booking.domain.value_object import BookingId, SeatNumber
from booking_desk.flight.domain.value_object import FlightNumber
from booking_desk.passenger.domain.value_object import PassportNumber
from booking_desk.shared.domain import AggregateRoot
from booking_desk.shared.domain.exception import BusinessRuleViolationException


class Booking(AggregateRoot[BookingId]):
    """フライト予約

    乗客・フライトは ID でのみ参照する。
    状態遷移はドメインイベントとして記録され、アプリケーション層が通知に変換する。
    """

    def __init__(
        self,
        id: BookingId,
        passenger_id: PassportNumber,
        flight_number: FlightNumber,
        seat_number: SeatNumber,
        status: BookingStatus = BookingStatus.PENDING,
    ) -> None:
        super().__init__(id)
        self._passenger_id = passenger_id
        self._flight_number = flight_number
        self._seat_number = seat_number
        self._status = status

    @property
    def passenger_id(self) -> PassportNumber:
        return self._passenger_id

    @property
    def flight_number(self) -> FlightNumber:
        return self._flight_number

    @property
    def seat_number(self) -> SeatNumber:
        return self._seat_number

    @property
    def status(self) -> BookingStatus:
        return self._status

    def confirm(self) -> None:
        """予約を確定する"""
        if self._status == BookingStatus.CANCELLED:
            raise BusinessRuleViolationException("Cannot confirm a cancelled booking")
        if self._status == BookingStatus.CONFIRMED:
            return

        self._status = BookingStatus.CONFIRMED
        self.add_domain_event(BookingConfirmed(booking_id=self.id))

    def cancel(self) -> None:
        """予約をキャンセルする"""
        if self._status == BookingStatus.CANCELLED:
            return

        self._status = BookingStatus.CANCELLED
        self.add_domain_event(BookingCancelled(booking_id=self.id))

    def change_status(self, status: BookingStatus | str) -> None:
        """任意のステータスへ遷移する

        Args:
            status: 遷移先。文字列の場合は BookingStatus に変換する

        Raises:
            ValueError: 未知のステータス文字列
            BusinessRuleViolationException: 許可されていない遷移
        """
        new_status = BookingStatus(status)
        if not self._status.can_transition_to(new_status):
            raise BusinessRuleViolationException(
                f"Cannot change booking status from {self._status.value} "
                f"to {new_status.value}"
            )

        previous = self._status
        self._status = new_status
        self.add_domain_event(
            BookingStatusChanged(
                booking_id=self.id, previous=previous, current=new_status
            )
        )

    def info(self) -> str:
        return (
            f"Booking ID: {self.id}, Seat Number: {self._seat_number}, "
            f"Status: {self._status.value}"
        )
