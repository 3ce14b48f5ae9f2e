from enum import Enum


class BookingStatus(str, Enum):
    """予約ステータス"""

    PENDING = "Pending"
    CONFIRMED = "Confirmed"
    CANCELLED = "Cancelled"

    @classmethod
    def _missing_(cls, value: object) -> "BookingStatus | None":
        # "confirmed" / "CONFIRMED" も受け付ける
        if isinstance(value, str):
            for status in cls:
                if status.value.upper() == value.strip().upper():
                    return status
        return None

    def can_transition_to(self, other: "BookingStatus") -> bool:
        return other in _TRANSITIONS[self]


_TRANSITIONS: dict[BookingStatus, frozenset[BookingStatus]] = {
    BookingStatus.PENDING: frozenset(
        {BookingStatus.CONFIRMED, BookingStatus.CANCELLED}
    ),
    BookingStatus.CONFIRMED: frozenset({BookingStatus.CANCELLED}),
    BookingStatus.CANCELLED: frozenset(),
}
