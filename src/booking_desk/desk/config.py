import os
from dataclasses import dataclass


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class DeskSettings:
    """予約デスクの起動設定

    ログレベルは POWERTOOLS_LOG_LEVEL に従う（未設定時は WARNING）。
    """

    itinerary_id: str = "I123"
    schedule_id: str = "S123"
    schedule_date: str = "2023-06-15"
    seed: bool = True
    notice_flights: tuple[str, ...] = ("FL123", "FL456")

    @classmethod
    def from_env(cls) -> "DeskSettings":
        notice_flights = os.getenv("DESK_NOTICE_FLIGHTS")
        return cls(
            itinerary_id=os.getenv("DESK_ITINERARY_ID", cls.itinerary_id),
            schedule_id=os.getenv("DESK_SCHEDULE_ID", cls.schedule_id),
            schedule_date=os.getenv("DESK_SCHEDULE_DATE", cls.schedule_date),
            seed=_env_flag("DESK_SEED", cls.seed),
            notice_flights=(
                tuple(f.strip() for f in notice_flights.split(",") if f.strip())
                if notice_flights
                else cls.notice_flights
            ),
        )
