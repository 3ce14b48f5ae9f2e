from dataclasses import dataclass


@dataclass(frozen=True)
class ScheduleId:
    """運航スケジュールID"""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("ScheduleId cannot be empty")

    def __str__(self) -> str:
        return self.value
