from .itinerary_id import ItineraryId

__all__ = ["ItineraryId"]
