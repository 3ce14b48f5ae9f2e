from .entity import Passenger
from .exception import PassengerNotFoundException
from .factory import PassengerDetails, PassengerFactory
from .repository import PassengerRepository
from .value_object import PassportNumber

__all__ = [
    "Passenger",
    "PassportNumber",
    "PassengerRepository",
    "PassengerFactory",
    "PassengerDetails",
    "PassengerNotFoundException",
]
