from booking_desk.booking.domain.value_object import BookingId
from booking_desk.itinerary.domain.entity import Itinerary
from booking_desk.itinerary.domain.value_object import ItineraryId


class TestItinerary:
    def test_add_keeps_insertion_order(self):
        itinerary = Itinerary(id=ItineraryId("I123"))
        itinerary.add_booking(BookingId("B2"))
        itinerary.add_booking(BookingId("B1"))
        assert itinerary.booking_ids == (BookingId("B2"), BookingId("B1"))

    def test_remove_deletes_all_equal_ids(self):
        itinerary = Itinerary(
            id=ItineraryId("I123"),
            booking_ids=[BookingId("B1"), BookingId("B2"), BookingId("B1")],
        )
        itinerary.remove_booking(BookingId("B1"))
        assert itinerary.booking_ids == (BookingId("B2"),)

    def test_remove_absent_is_noop(self):
        itinerary = Itinerary(id=ItineraryId("I123"), booking_ids=[BookingId("B1")])
        itinerary.remove_booking(BookingId("B9"))
        assert itinerary.contains(BookingId("B1"))
