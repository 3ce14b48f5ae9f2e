from .itinerary import Itinerary

__all__ = ["Itinerary"]
