from typing import TypedDict

from booking_desk.flight.domain.entity import Flight
from booking_desk.flight.domain.enum import FlightType
from booking_desk.flight.domain.value_object import FlightNumber


class FlightDetails(TypedDict):
    """フライト詳細の入力データ構造"""

    flight_number: str
    origin: str
    destination: str
    departure_time: str
    arrival_time: str


class FlightFactory:
    """フライトエンティティのファクトリ

    - 種別タグから FlightType への変換
    - プリミティブ型から Value Object への変換
    """

    def create(self, flight_type: str, flight_details: FlightDetails) -> Flight | None:
        """種別タグに応じたフライトを生成する

        Args:
            flight_type: 種別タグ（"Domestic" / "International"）
            flight_details: フライト詳細情報

        Returns:
            Flight | None: 生成されたフライト。不明な種別タグの場合は None
        """
        resolved_type = FlightType.from_tag(flight_type)
        if resolved_type is None:
            return None

        return Flight(
            id=FlightNumber(flight_details["flight_number"]),
            flight_type=resolved_type,
            origin=flight_details["origin"],
            destination=flight_details["destination"],
            departure_time=flight_details["departure_time"],
            arrival_time=flight_details["arrival_time"],
        )
