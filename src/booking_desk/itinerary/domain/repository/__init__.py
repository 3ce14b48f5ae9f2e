from .itinerary_repository import ItineraryRepository

__all__ = ["ItineraryRepository"]
