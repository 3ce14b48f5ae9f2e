from booking_desk.flight.domain.entity import Flight
from booking_desk.flight.domain.exception import FlightNotFoundException
from booking_desk.flight.domain.repository import FlightRepository
from booking_desk.flight.domain.value_object import FlightNumber
from booking_desk.passenger.domain.entity import Passenger
from booking_desk.passenger.domain.repository import PassengerRepository
from booking_desk.passenger.domain.value_object import PassportNumber
from booking_desk.shared.utils import get_logger

logger = get_logger("flight")


class FlightNotificationService:
    """フライト購読者への通知サービス

    フライトが保持する購読者 ID を登録順に乗客へ解決し、update を呼び出す。
    配信は同期・ベストエフォートで、途中で失敗しても配信済み分は戻さない。
    """

    def __init__(
        self,
        flight_repository: FlightRepository,
        passenger_repository: PassengerRepository,
    ) -> None:
        self._flight_repository = flight_repository
        self._passenger_repository = passenger_repository

    def subscribe(
        self, flight_number: FlightNumber, passenger_id: PassportNumber
    ) -> None:
        """乗客をフライトの購読者に追加する"""
        flight = self._get_flight(flight_number)
        flight.attach(passenger_id)
        self._flight_repository.save(flight)
        logger.debug(
            "Passenger attached to flight",
            extra={
                "flight_number": str(flight_number),
                "passport_number": str(passenger_id),
            },
        )

    def unsubscribe(
        self, flight_number: FlightNumber, passenger_id: PassportNumber
    ) -> None:
        """乗客を購読者から外す"""
        flight = self._get_flight(flight_number)
        flight.detach(passenger_id)
        self._flight_repository.save(flight)

    def notify(self, flight_number: FlightNumber, message: str) -> list[Passenger]:
        """購読者全員にメッセージを配信する

        Returns:
            list[Passenger]: 配信した乗客（配信順）
        """
        flight = self._get_flight(flight_number)

        delivered: list[Passenger] = []
        for passenger_id in flight.subscribers:
            passenger = self._passenger_repository.find_by_id(passenger_id)
            if passenger is None:
                logger.warning(
                    "Subscriber not found, skipped",
                    extra={
                        "flight_number": str(flight_number),
                        "passport_number": str(passenger_id),
                    },
                )
                continue
            passenger.update(message)
            delivered.append(passenger)

        logger.info(
            "Flight notification sent",
            extra={
                "flight_number": str(flight_number),
                "notification": message,
                "recipients": len(delivered),
            },
        )
        return delivered

    def _get_flight(self, flight_number: FlightNumber) -> Flight:
        flight = self._flight_repository.find_by_id(flight_number)
        if flight is None:
            raise FlightNotFoundException(flight_number)
        return flight
