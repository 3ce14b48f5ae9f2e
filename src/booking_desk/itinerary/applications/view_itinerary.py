from dataclasses import dataclass

from booking_desk.booking.domain.entity import Booking
from booking_desk.booking.domain.repository import BookingRepository
from booking_desk.flight.domain.entity import Flight
from booking_desk.flight.domain.exception import FlightNotFoundException
from booking_desk.flight.domain.repository import FlightRepository
from booking_desk.itinerary.domain.entity import Itinerary
from booking_desk.itinerary.domain.exception import ItineraryNotFoundException
from booking_desk.itinerary.domain.repository import ItineraryRepository
from booking_desk.itinerary.domain.value_object import ItineraryId
from booking_desk.shared.utils import get_logger

logger = get_logger("itinerary")


@dataclass(frozen=True)
class ItineraryEntry:
    booking: Booking
    flight: Flight


class ViewItineraryService:
    """旅程表示サービス

    旅程が保持する予約IDを、予約とフライトに解決して登録順に返す。
    """

    def __init__(
        self,
        itinerary_repository: ItineraryRepository,
        booking_repository: BookingRepository,
        flight_repository: FlightRepository,
    ) -> None:
        self._itinerary_repository = itinerary_repository
        self._booking_repository = booking_repository
        self._flight_repository = flight_repository

    def get(self, itinerary_id: ItineraryId) -> Itinerary:
        itinerary = self._itinerary_repository.find_by_id(itinerary_id)
        if itinerary is None:
            raise ItineraryNotFoundException(itinerary_id)
        return itinerary

    def entries(self, itinerary_id: ItineraryId) -> list[ItineraryEntry]:
        itinerary = self.get(itinerary_id)

        entries: list[ItineraryEntry] = []
        for booking_id in itinerary.booking_ids:
            booking = self._booking_repository.find_by_id(booking_id)
            if booking is None:
                logger.warning(
                    "Booking in itinerary no longer exists, skipped",
                    extra={
                        "itinerary_id": str(itinerary_id),
                        "booking_id": str(booking_id),
                    },
                )
                continue
            flight = self._flight_repository.find_by_id(booking.flight_number)
            if flight is None:
                raise FlightNotFoundException(booking.flight_number)
            entries.append(ItineraryEntry(booking=booking, flight=flight))
        return entries
