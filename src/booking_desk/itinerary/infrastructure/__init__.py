from .in_memory_itinerary_repository import InMemoryItineraryRepository

__all__ = ["InMemoryItineraryRepository"]
