from booking_desk.booking.applications.booking_notifier import (
    BookingNotifier,
    BookingResult,
)
from booking_desk.booking.domain.factory import BookingDetails, BookingFactory
from booking_desk.booking.domain.repository import BookingRepository
from booking_desk.flight.applications.notify_flight import FlightNotificationService
from booking_desk.flight.domain.value_object import FlightNumber
from booking_desk.itinerary.domain.exception import ItineraryNotFoundException
from booking_desk.itinerary.domain.repository import ItineraryRepository
from booking_desk.itinerary.domain.value_object import ItineraryId
from booking_desk.passenger.domain.exception import PassengerNotFoundException
from booking_desk.passenger.domain.repository import PassengerRepository
from booking_desk.passenger.domain.value_object import PassportNumber
from booking_desk.schedule.applications.find_flight import FlightLookupService
from booking_desk.schedule.domain.value_object import ScheduleId
from booking_desk.shared.domain.exception import BusinessRuleViolationException
from booking_desk.shared.utils import get_logger

logger = get_logger("booking")


class BookFlightService:
    """フライト予約サービス

    1. 乗客とフライト（スケジュール内）を解決する
    2. PENDING の予約を生成・保存し、旅程に追加する
    3. 乗客をフライトの購読者に追加し、予約を確定して通知する

    乗客・フライトが見つからない場合は例外を送出し、予約は一切作られない。
    """

    def __init__(
        self,
        booking_repository: BookingRepository,
        passenger_repository: PassengerRepository,
        itinerary_repository: ItineraryRepository,
        flight_lookup: FlightLookupService,
        notification_service: FlightNotificationService,
        notifier: BookingNotifier,
        factory: BookingFactory,
    ) -> None:
        self._booking_repository = booking_repository
        self._passenger_repository = passenger_repository
        self._itinerary_repository = itinerary_repository
        self._flight_lookup = flight_lookup
        self._notification_service = notification_service
        self._notifier = notifier
        self._factory = factory

    def book(
        self,
        schedule_id: ScheduleId,
        itinerary_id: ItineraryId,
        passenger_id: PassportNumber,
        flight_number: FlightNumber,
        booking_details: BookingDetails,
    ) -> BookingResult:
        passenger = self._passenger_repository.find_by_id(passenger_id)
        if passenger is None:
            raise PassengerNotFoundException(passenger_id)

        flight = self._flight_lookup.find(schedule_id, flight_number)
        if not flight.check_availability():
            raise BusinessRuleViolationException(
                f"Flight {flight.flight_number} is not available"
            )

        itinerary = self._itinerary_repository.find_by_id(itinerary_id)
        if itinerary is None:
            raise ItineraryNotFoundException(itinerary_id)

        booking = self._factory.create(
            passenger_id=passenger.passport_number,
            flight_number=flight.flight_number,
            booking_details=booking_details,
        )
        self._booking_repository.add(booking)
        itinerary.add_booking(booking.id)
        self._itinerary_repository.save(itinerary)
        self._notification_service.subscribe(
            flight.flight_number, passenger.passport_number
        )

        booking.confirm()
        self._booking_repository.save(booking)
        broadcasts = self._notifier.publish(booking)

        logger.info(
            "Flight booked",
            extra={
                "booking_id": str(booking.id),
                "passport_number": str(passenger.passport_number),
                "flight_number": str(flight.flight_number),
                "seat_number": str(booking.seat_number),
            },
        )
        return BookingResult(booking=booking, broadcasts=broadcasts)
