from booking_desk.flight.domain.entity import Flight
from booking_desk.flight.domain.value_object import FlightNumber
from booking_desk.shared.domain import Repository


class FlightRepository(Repository[Flight, FlightNumber]):
    """フライトリポジトリのインターフェース"""
