from dataclasses import dataclass

from booking_desk.booking.domain.repository import BookingRepository
from booking_desk.flight.domain.entity import Flight
from booking_desk.flight.domain.enum import FlightType
from booking_desk.passenger.domain.entity import Passenger
from booking_desk.passenger.domain.repository import PassengerRepository
from booking_desk.schedule.applications.find_flight import FlightLookupService
from booking_desk.schedule.domain.value_object import ScheduleId


@dataclass(frozen=True)
class FlightManifest:
    """フライトごとの搭乗者一覧"""

    flight: Flight
    passengers: list[Passenger]


class ListPassengersService:
    """予約を持つ乗客をフライト単位で一覧する"""

    def __init__(
        self,
        booking_repository: BookingRepository,
        passenger_repository: PassengerRepository,
        flight_lookup: FlightLookupService,
    ) -> None:
        self._booking_repository = booking_repository
        self._passenger_repository = passenger_repository
        self._flight_lookup = flight_lookup

    def manifest(self, flight: Flight) -> FlightManifest:
        passengers: list[Passenger] = []
        for booking in self._booking_repository.find_by_flight_number(
            flight.flight_number
        ):
            passenger = self._passenger_repository.find_by_id(booking.passenger_id)
            if passenger is not None:
                passengers.append(passenger)
        return FlightManifest(flight=flight, passengers=passengers)

    def by_flight_type(
        self, schedule_id: ScheduleId
    ) -> dict[FlightType, list[FlightManifest]]:
        """国内線 → 国際線の順に、スケジュール順でフライトごとの乗客を返す"""
        flights = self._flight_lookup.list_flights(schedule_id)
        return {
            flight_type: [
                self.manifest(flight)
                for flight in flights
                if flight.flight_type == flight_type
            ]
            for flight_type in (FlightType.DOMESTIC, FlightType.INTERNATIONAL)
        }
