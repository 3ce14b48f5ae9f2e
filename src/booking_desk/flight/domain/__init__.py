from .entity import Flight
from .enum import FlightType
from .exception import FlightNotFoundException
from .factory import FlightDetails, FlightFactory
from .repository import FlightRepository
from .value_object import FlightNumber, calculate_fare

__all__ = [
    "Flight",
    "FlightType",
    "FlightNumber",
    "FlightRepository",
    "FlightFactory",
    "FlightDetails",
    "FlightNotFoundException",
    "calculate_fare",
]
