from booking_desk.itinerary.domain.entity import Itinerary
from booking_desk.itinerary.domain.value_object import ItineraryId
from booking_desk.shared.domain import Repository


class ItineraryRepository(Repository[Itinerary, ItineraryId]):
    """旅程リポジトリのインターフェース"""
