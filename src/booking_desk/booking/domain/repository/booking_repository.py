from abc import abstractmethod

from booking_desk.booking.domain.entity import Booking
from booking_desk.booking.domain.value_object import BookingId
from booking_desk.flight.domain.value_object import FlightNumber
from booking_desk.shared.domain import Repository


class BookingRepository(Repository[Booking, BookingId]):
    """有効な予約のリポジトリのインターフェース

    キャンセル済みの予約は delete で取り除く。
    """

    @abstractmethod
    def find_by_flight_number(self, flight_number: FlightNumber) -> list[Booking]:
        """フライト番号で検索する（登録順）"""
        raise NotImplementedError
