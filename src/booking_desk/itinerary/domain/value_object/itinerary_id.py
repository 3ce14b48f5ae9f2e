from dataclasses import dataclass


@dataclass(frozen=True)
class ItineraryId:
    """旅程ID"""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("ItineraryId cannot be empty")

    def __str__(self) -> str:
        return self.value
