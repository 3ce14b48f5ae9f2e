from .flight_factory import FlightDetails, FlightFactory

__all__ = ["FlightFactory", "FlightDetails"]
