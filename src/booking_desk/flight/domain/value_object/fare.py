from decimal import Decimal

from booking_desk.flight.domain.enum import FlightType
from booking_desk.shared.domain import Money

_BASE_FARES: dict[FlightType, Decimal] = {
    FlightType.DOMESTIC: Decimal("50.0"),
    FlightType.INTERNATIONAL: Decimal("200.0"),
}


def calculate_fare(flight_type: FlightType) -> Money:
    """種別のみで決まる基本運賃（距離・クラス・需要は考慮しない）"""
    return Money.usd(_BASE_FARES[flight_type])
