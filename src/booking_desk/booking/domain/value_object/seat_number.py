import re
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class SeatNumber:
    """座席番号

    列番号（1-3桁）+ 座席記号（1文字）。例: 12A, 3F
    """

    value: str

    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^\d{1,3}[A-Z]$")

    def __post_init__(self) -> None:
        normalized = self.value.strip().upper()
        if not self.PATTERN.match(normalized):
            raise ValueError(
                f"Invalid seat number format: {self.value}. "
                "Expected format: 12A (row + seat letter)"
            )
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value
