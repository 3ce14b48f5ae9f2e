from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class ScheduleDate:
    """運航日（YYYY-MM-DD）"""

    value: date

    @classmethod
    def from_string(cls, s: str) -> "ScheduleDate":
        """ISO 8601 形式の日付文字列から生成"""
        try:
            return cls(value=date.fromisoformat(s))
        except ValueError as e:
            raise ValueError(f"Invalid schedule date: {s}") from e

    def __str__(self) -> str:
        return self.value.isoformat()
