from .in_memory_flight_repository import InMemoryFlightRepository

__all__ = ["InMemoryFlightRepository"]
