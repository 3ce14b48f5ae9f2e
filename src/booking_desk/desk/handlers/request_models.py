import re

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from booking_desk.passenger.applications.modify_passenger import ContactField


EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+$"
PHONE_NUMBER_PATTERN = r"^\+?[0-9][0-9\- ]{3,19}$"


class PassportLookupRequest(BaseModel):
    """旅券番号による検索リクエスト"""

    passport_number: str = Field(..., min_length=1, description="旅券番号")


class FlightLookupRequest(BaseModel):
    """フライト番号による検索リクエスト"""

    flight_number: str = Field(
        ...,
        pattern=r"^[A-Za-z]{2}\d{1,4}$",
        description="フライト番号（2文字 + 1-4桁）",
        examples=["FL123"],
    )


class RegisterPassengerRequest(BaseModel):
    """乗客登録リクエストモデル"""

    name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., pattern=EMAIL_PATTERN, examples=["john@example.com"])
    phone_number: str = Field(..., pattern=PHONE_NUMBER_PATTERN)
    passport_number: str = Field(..., min_length=1, max_length=20)


class ModifyPassengerRequest(BaseModel):
    """連絡先変更リクエストモデル"""

    passport_number: str = Field(..., min_length=1)
    contact_field: ContactField
    value: str = Field(..., min_length=1)

    @field_validator("value")
    @classmethod
    def match_contact_format(cls, v: str, info: ValidationInfo) -> str:
        """変更対象の項目に応じて、登録時と同じ書式で検証する"""
        contact_field = info.data.get("contact_field")
        if contact_field == ContactField.EMAIL and not re.match(EMAIL_PATTERN, v):
            raise ValueError("Invalid email format")
        if contact_field == ContactField.PHONE_NUMBER and not re.match(
            PHONE_NUMBER_PATTERN, v
        ):
            raise ValueError("Invalid phone number format")
        return v


class BookFlightRequest(BaseModel):
    """フライト予約リクエストモデル"""

    passport_number: str = Field(..., min_length=1)
    flight_number: str = Field(..., pattern=r"^[A-Za-z]{2}\d{1,4}$")
    seat_number: str = Field(
        ...,
        pattern=r"^\d{1,3}[A-Za-z]$",
        description="座席番号（列番号 + 座席記号）",
        examples=["12A"],
    )
    booking_id: str = Field(..., min_length=1, max_length=20)


class CancelBookingRequest(BaseModel):
    """予約キャンセルリクエストモデル"""

    booking_id: str = Field(..., min_length=1)
