from .entity import Itinerary
from .exception import ItineraryNotFoundException
from .repository import ItineraryRepository
from .value_object import ItineraryId

__all__ = [
    "Itinerary",
    "ItineraryId",
    "ItineraryRepository",
    "ItineraryNotFoundException",
]
