from .passenger_factory import PassengerDetails, PassengerFactory

__all__ = ["PassengerFactory", "PassengerDetails"]
