from booking_desk.shared.domain import ResourceNotFoundException


class ItineraryNotFoundException(ResourceNotFoundException):
    def __init__(self, itinerary_id: object) -> None:
        super().__init__(f"Itinerary not found: {itinerary_id}")
        self.itinerary_id = itinerary_id
