from dataclasses import dataclass

from booking_desk.booking.applications.book_flight import BookFlightService
from booking_desk.booking.applications.booking_notifier import BookingNotifier
from booking_desk.booking.applications.cancel_booking import CancelBookingService
from booking_desk.booking.applications.change_booking_status import (
    ChangeBookingStatusService,
)
from booking_desk.booking.applications.list_passengers import ListPassengersService
from booking_desk.booking.domain.factory import BookingFactory
from booking_desk.booking.infrastructure import InMemoryBookingRepository
from booking_desk.desk.config import DeskSettings
from booking_desk.flight.applications.notify_flight import FlightNotificationService
from booking_desk.flight.domain.factory import FlightFactory
from booking_desk.flight.infrastructure import InMemoryFlightRepository
from booking_desk.itinerary.applications.view_itinerary import ViewItineraryService
from booking_desk.itinerary.domain.entity import Itinerary
from booking_desk.itinerary.domain.value_object import ItineraryId
from booking_desk.itinerary.infrastructure import InMemoryItineraryRepository
from booking_desk.passenger.applications.find_passenger import FindPassengerService
from booking_desk.passenger.applications.modify_passenger import (
    ModifyPassengerService,
)
from booking_desk.passenger.applications.register_passenger import (
    RegisterPassengerService,
)
from booking_desk.passenger.domain.factory import PassengerFactory
from booking_desk.passenger.infrastructure import InMemoryPassengerRepository
from booking_desk.schedule.applications.find_flight import FlightLookupService
from booking_desk.schedule.applications.register_flight import RegisterFlightService
from booking_desk.schedule.domain.entity import Schedule
from booking_desk.schedule.domain.value_object import ScheduleDate, ScheduleId
from booking_desk.schedule.infrastructure import InMemoryScheduleRepository


@dataclass
class DeskSession:
    """1回の実行分の状態

    エンティティ種別ごとのリポジトリが唯一の所有者で、
    メニューの各操作はこのセッションを受け取って実行する。
    """

    settings: DeskSettings
    itinerary_id: ItineraryId
    schedule_id: ScheduleId
    passengers: InMemoryPassengerRepository
    flights: InMemoryFlightRepository
    bookings: InMemoryBookingRepository
    itineraries: InMemoryItineraryRepository
    schedules: InMemoryScheduleRepository
    register_passenger: RegisterPassengerService
    modify_passenger: ModifyPassengerService
    find_passenger: FindPassengerService
    register_flight: RegisterFlightService
    flight_lookup: FlightLookupService
    notifications: FlightNotificationService
    book_flight: BookFlightService
    cancel_booking: CancelBookingService
    change_booking_status: ChangeBookingStatusService
    list_passengers: ListPassengersService
    view_itinerary: ViewItineraryService


def create_session(settings: DeskSettings) -> DeskSession:
    """空の旅程・スケジュールを持つセッションを組み立てる"""
    passengers = InMemoryPassengerRepository()
    flights = InMemoryFlightRepository()
    bookings = InMemoryBookingRepository()
    itineraries = InMemoryItineraryRepository()
    schedules = InMemoryScheduleRepository()

    itinerary_id = ItineraryId(settings.itinerary_id)
    schedule_id = ScheduleId(settings.schedule_id)
    itineraries.add(Itinerary(id=itinerary_id))
    schedules.add(
        Schedule(id=schedule_id, date=ScheduleDate.from_string(settings.schedule_date))
    )

    notifications = FlightNotificationService(
        flight_repository=flights, passenger_repository=passengers
    )
    notifier = BookingNotifier(
        flight_repository=flights,
        passenger_repository=passengers,
        notification_service=notifications,
    )
    flight_lookup = FlightLookupService(
        schedule_repository=schedules, flight_repository=flights
    )

    return DeskSession(
        settings=settings,
        itinerary_id=itinerary_id,
        schedule_id=schedule_id,
        passengers=passengers,
        flights=flights,
        bookings=bookings,
        itineraries=itineraries,
        schedules=schedules,
        register_passenger=RegisterPassengerService(
            repository=passengers, factory=PassengerFactory()
        ),
        modify_passenger=ModifyPassengerService(repository=passengers),
        find_passenger=FindPassengerService(repository=passengers),
        register_flight=RegisterFlightService(
            schedule_repository=schedules,
            flight_repository=flights,
            factory=FlightFactory(),
        ),
        flight_lookup=flight_lookup,
        notifications=notifications,
        book_flight=BookFlightService(
            booking_repository=bookings,
            passenger_repository=passengers,
            itinerary_repository=itineraries,
            flight_lookup=flight_lookup,
            notification_service=notifications,
            notifier=notifier,
            factory=BookingFactory(),
        ),
        cancel_booking=CancelBookingService(
            booking_repository=bookings,
            itinerary_repository=itineraries,
            notifier=notifier,
        ),
        change_booking_status=ChangeBookingStatusService(
            booking_repository=bookings,
            itinerary_repository=itineraries,
            notifier=notifier,
        ),
        list_passengers=ListPassengersService(
            booking_repository=bookings,
            passenger_repository=passengers,
            flight_lookup=flight_lookup,
        ),
        view_itinerary=ViewItineraryService(
            itinerary_repository=itineraries,
            booking_repository=bookings,
            flight_repository=flights,
        ),
    )
