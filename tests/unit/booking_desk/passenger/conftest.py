import pytest

from booking_desk.passenger.domain.entity import Passenger
from booking_desk.passenger.domain.value_object import PassportNumber


@pytest.fixture
def create_passenger():
    """Passenger を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        passport_number: str = "P12345",
        name: str = "John Doe",
        email: str = "john@example.com",
        phone_number: str = "1234567890",
    ) -> Passenger:
        return Passenger(
            id=PassportNumber(value=passport_number),
            name=name,
            email=email,
            phone_number=phone_number,
        )

    return _factory
