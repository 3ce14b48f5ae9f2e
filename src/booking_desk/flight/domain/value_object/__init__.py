from .fare import calculate_fare
from .flight_number import FlightNumber

__all__ = ["FlightNumber", "calculate_fare"]
