from booking_desk.booking.applications.booking_notifier import (
    BookingNotifier,
    BookingResult,
)
from booking_desk.booking.domain.exception import BookingNotFoundException
from booking_desk.booking.domain.repository import BookingRepository
from booking_desk.booking.domain.value_object import BookingId
from booking_desk.itinerary.domain.repository import ItineraryRepository
from booking_desk.shared.utils import get_logger

logger = get_logger("booking")


def release_booking(
    booking_id: BookingId,
    booking_repository: BookingRepository,
    itinerary_repository: ItineraryRepository,
) -> None:
    """キャンセル済みの予約を全旅程と有効な予約の一覧から取り除く"""
    for itinerary in itinerary_repository.find_all():
        if itinerary.contains(booking_id):
            itinerary.remove_booking(booking_id)
            itinerary_repository.save(itinerary)
    booking_repository.delete(booking_id)


class CancelBookingService:
    """予約キャンセルサービス

    キャンセルを通知したあと、全旅程と有効な予約の一覧から取り除く。
    """

    def __init__(
        self,
        booking_repository: BookingRepository,
        itinerary_repository: ItineraryRepository,
        notifier: BookingNotifier,
    ) -> None:
        self._booking_repository = booking_repository
        self._itinerary_repository = itinerary_repository
        self._notifier = notifier

    def cancel(self, booking_id: BookingId) -> BookingResult:
        booking = self._booking_repository.find_by_id(booking_id)
        if booking is None:
            raise BookingNotFoundException(booking_id)

        booking.cancel()
        broadcasts = self._notifier.publish(booking)
        release_booking(
            booking_id, self._booking_repository, self._itinerary_repository
        )

        logger.info("Booking cancelled", extra={"booking_id": str(booking_id)})
        return BookingResult(booking=booking, broadcasts=broadcasts)
