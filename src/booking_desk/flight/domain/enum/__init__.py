from .flight_type import FlightType

__all__ = ["FlightType"]
