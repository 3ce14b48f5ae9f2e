from booking_desk.booking.domain.value_object import BookingId
from booking_desk.itinerary.domain.value_object import ItineraryId
from booking_desk.shared.domain import AggregateRoot


class Itinerary(AggregateRoot[ItineraryId]):
    """旅程（予約の表示用グループ）

    予約は ID で保持し、予約のライフサイクルは所有しない。
    """

    def __init__(
        self, id: ItineraryId, booking_ids: list[BookingId] | None = None
    ) -> None:
        super().__init__(id)
        self._booking_ids: list[BookingId] = list(booking_ids or [])

    @property
    def booking_ids(self) -> tuple[BookingId, ...]:
        return tuple(self._booking_ids)

    def add_booking(self, booking_id: BookingId) -> None:
        self._booking_ids.append(booking_id)

    def remove_booking(self, booking_id: BookingId) -> None:
        """一致する予約IDをすべて取り除く"""
        self._booking_ids = [b for b in self._booking_ids if b != booking_id]

    def contains(self, booking_id: BookingId) -> bool:
        return booking_id in self._booking_ids
