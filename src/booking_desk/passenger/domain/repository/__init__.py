from .passenger_repository import PassengerRepository

__all__ = ["PassengerRepository"]
