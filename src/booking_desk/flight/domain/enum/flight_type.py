from enum import Enum


class FlightType(str, Enum):
    """フライト種別"""

    DOMESTIC = "Domestic"
    INTERNATIONAL = "International"

    @classmethod
    def from_tag(cls, tag: str) -> "FlightType | None":
        """種別タグ（"Domestic" / "DOMESTIC" 等）から変換する。不明なタグは None"""
        normalized = tag.strip().upper()
        for flight_type in cls:
            if flight_type.name == normalized:
                return flight_type
        return None

    @property
    def default_notice(self) -> str:
        """種別ごとの一斉通知メッセージ"""
        return f"This is a notification for {self.value.lower()} flight."
