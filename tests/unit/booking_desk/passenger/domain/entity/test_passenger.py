import pytest

from booking_desk.passenger.domain.value_object import PassportNumber


class TestPassenger:
    """Passenger Entity のテスト"""

    def test_identity_is_passport_number(self, create_passenger):
        """旅券番号が同じなら同一の乗客"""
        assert create_passenger(name="A") == create_passenger(name="B")
        assert create_passenger(passport_number="P1") != create_passenger(
            passport_number="P2"
        )

    def test_change_contact(self, create_passenger):
        passenger = create_passenger()
        passenger.change_email("new@example.com")
        passenger.change_phone_number("5550000")
        assert passenger.email == "new@example.com"
        assert passenger.phone_number == "5550000"

    def test_update_records_notification(self, create_passenger):
        passenger = create_passenger()
        passenger.update("first")
        passenger.update("second")
        assert passenger.notifications == ("first", "second")

    def test_info(self, create_passenger):
        assert create_passenger().info() == (
            "Name: John Doe, Email: john@example.com, Phone Number: 1234567890\n"
            "Passport Number: P12345"
        )

    def test_empty_passport_number_raises(self):
        with pytest.raises(ValueError, match="Passport number cannot be empty"):
            PassportNumber("  ")
