from .in_memory_passenger_repository import InMemoryPassengerRepository

__all__ = ["InMemoryPassengerRepository"]
