from dataclasses import dataclass


@dataclass(frozen=True)
class PassportNumber:
    """旅券番号（乗客の識別子）

    検索は完全一致。前後の空白のみ除去する。
    """

    value: str

    def __post_init__(self) -> None:
        normalized = self.value.strip()
        if not normalized:
            raise ValueError("Passport number cannot be empty")
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value
