import pytest
from pydantic import ValidationError

from booking_desk.desk.handlers.request_models import ModifyPassengerRequest
from booking_desk.passenger.applications.modify_passenger import ContactField


class TestModifyPassengerRequest:
    """連絡先変更リクエストの検証"""

    def test_valid_email(self):
        request = ModifyPassengerRequest(
            passport_number="P12345",
            contact_field=ContactField.EMAIL,
            value="john.doe@example.org",
        )
        assert request.value == "john.doe@example.org"

    def test_valid_phone_number(self):
        request = ModifyPassengerRequest(
            passport_number="P12345",
            contact_field=ContactField.PHONE_NUMBER,
            value="5551234567",
        )
        assert request.value == "5551234567"

    @pytest.mark.parametrize(
        "contact_field, value",
        [
            (ContactField.EMAIL, "not-an-email"),
            (ContactField.EMAIL, "5551234567"),
            (ContactField.PHONE_NUMBER, "call-me"),
            (ContactField.PHONE_NUMBER, "john@example.com"),
        ],
    )
    def test_value_must_match_contact_field_format(self, contact_field, value):
        """変更対象の項目の書式に合わない値はエラーになること"""
        with pytest.raises(ValidationError) as exc_info:
            ModifyPassengerRequest(
                passport_number="P12345", contact_field=contact_field, value=value
            )
        assert exc_info.value.errors()[0]["loc"] == ("value",)
