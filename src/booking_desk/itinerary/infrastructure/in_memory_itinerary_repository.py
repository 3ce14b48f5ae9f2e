from booking_desk.itinerary.domain.entity import Itinerary
from booking_desk.itinerary.domain.repository import ItineraryRepository
from booking_desk.itinerary.domain.value_object import ItineraryId
from booking_desk.shared.infrastructure import InMemoryStore


class InMemoryItineraryRepository(ItineraryRepository):
    """プロセス内メモリを使用した ItineraryRepository の具象実装"""

    def __init__(self) -> None:
        self._store: InMemoryStore[Itinerary, ItineraryId] = InMemoryStore(
            "Itinerary"
        )

    def add(self, itinerary: Itinerary) -> None:
        self._store.add(itinerary)

    def save(self, itinerary: Itinerary) -> None:
        self._store.put(itinerary)

    def find_by_id(self, itinerary_id: ItineraryId) -> Itinerary | None:
        return self._store.get(itinerary_id)

    def find_all(self) -> list[Itinerary]:
        return self._store.values()

    def delete(self, itinerary_id: ItineraryId) -> None:
        self._store.remove(itinerary_id)
