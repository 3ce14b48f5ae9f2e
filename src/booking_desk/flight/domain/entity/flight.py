from booking_desk.flight.domain.enum import FlightType
from booking_desk.flight.domain.value_object import FlightNumber, calculate_fare
from booking_desk.passenger.domain.value_object import PassportNumber
from booking_desk.shared.domain import AggregateRoot, Money


class Flight(AggregateRoot[FlightNumber]):
    """フライト

    国内線 / 国際線は FlightType タグで区別し、運賃はタグのみで決まる。
    通知の購読者は乗客 ID（旅券番号）の順序付き集合として保持する。
    出発・到着時刻は表示用の文字列で、解釈しない。
    """

    def __init__(
        self,
        id: FlightNumber,
        flight_type: FlightType,
        origin: str,
        destination: str,
        departure_time: str,
        arrival_time: str,
        subscribers: list[PassportNumber] | None = None,
    ) -> None:
        super().__init__(id)
        self._flight_type = flight_type
        self._origin = origin
        self._destination = destination
        self._departure_time = departure_time
        self._arrival_time = arrival_time
        self._subscribers: list[PassportNumber] = []
        for passenger_id in subscribers or []:
            self.attach(passenger_id)

    @property
    def flight_number(self) -> FlightNumber:
        return self._id

    @property
    def flight_type(self) -> FlightType:
        return self._flight_type

    @property
    def origin(self) -> str:
        return self._origin

    @property
    def destination(self) -> str:
        return self._destination

    @property
    def departure_time(self) -> str:
        return self._departure_time

    @property
    def arrival_time(self) -> str:
        return self._arrival_time

    @property
    def subscribers(self) -> tuple[PassportNumber, ...]:
        """購読者 ID（登録順）"""
        return tuple(self._subscribers)

    def check_availability(self) -> bool:
        # 座席在庫は管理しない
        return True

    def calculate_fare(self) -> Money:
        return calculate_fare(self._flight_type)

    def attach(self, passenger_id: PassportNumber) -> None:
        """購読者を追加する（登録済みなら何もしない）"""
        if passenger_id not in self._subscribers:
            self._subscribers.append(passenger_id)

    def detach(self, passenger_id: PassportNumber) -> None:
        """購読者を外す（未登録なら何もしない）"""
        self._subscribers = [s for s in self._subscribers if s != passenger_id]

    def is_attached(self, passenger_id: PassportNumber) -> bool:
        return passenger_id in self._subscribers

    def info(self) -> str:
        return (
            f"Flight Number: {self.id}, Origin: {self._origin}, "
            f"Destination: {self._destination}, "
            f"Departure Time: {self._departure_time}, "
            f"Arrival Time: {self._arrival_time}"
        )
