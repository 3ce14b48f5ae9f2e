from booking_desk.booking.applications.booking_notifier import (
    BookingNotifier,
    BookingResult,
)
from booking_desk.booking.applications.cancel_booking import release_booking
from booking_desk.booking.domain.enum import BookingStatus
from booking_desk.booking.domain.exception import BookingNotFoundException
from booking_desk.booking.domain.repository import BookingRepository
from booking_desk.booking.domain.value_object import BookingId
from booking_desk.itinerary.domain.repository import ItineraryRepository
from booking_desk.shared.utils import get_logger

logger = get_logger("booking")


class ChangeBookingStatusService:
    """予約ステータスの汎用変更サービス（許可された遷移のみ）

    CANCELLED への遷移では、キャンセルと同様に旅程と予約一覧から取り除く。
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

    def change(
        self, booking_id: BookingId, status: BookingStatus | str
    ) -> BookingResult:
        booking = self._booking_repository.find_by_id(booking_id)
        if booking is None:
            raise BookingNotFoundException(booking_id)

        previous = booking.status
        booking.change_status(status)
        self._booking_repository.save(booking)
        broadcasts = self._notifier.publish(booking)

        if booking.status == BookingStatus.CANCELLED:
            release_booking(
                booking_id, self._booking_repository, self._itinerary_repository
            )

        logger.info(
            "Booking status changed",
            extra={
                "booking_id": str(booking_id),
                "previous": previous.value,
                "current": booking.status.value,
            },
        )
        return BookingResult(booking=booking, broadcasts=broadcasts)
