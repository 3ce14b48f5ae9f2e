import pytest

from booking_desk.booking.domain.value_object import BookingId, SeatNumber


class TestSeatNumber:
    def test_valid_seat_number(self):
        seat = SeatNumber("12a")
        assert seat.value == "12A"

    @pytest.mark.parametrize("value", ["", "A12", "1234A", "12AB"])
    def test_invalid_format_raises_error(self, value):
        with pytest.raises(ValueError, match="Invalid seat number format"):
            SeatNumber(value)


class TestBookingId:
    def test_str_returns_value(self):
        assert str(BookingId(value="B123")) == "B123"

    def test_empty_raises(self):
        with pytest.raises(ValueError, match="BookingId cannot be empty"):
            BookingId(value=" ")
