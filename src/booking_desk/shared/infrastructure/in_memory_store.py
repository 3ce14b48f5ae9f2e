from typing import Generic, TypeVar

from booking_desk.shared.domain.entity import Entity
from booking_desk.shared.domain.exception import DuplicateResourceException

T = TypeVar("T", bound=Entity)
ID = TypeVar("ID")


class InMemoryStore(Generic[T, ID]):
    """ID をキーにした集約ストア

    各リポジトリの具象実装が内部に1つ持つ。挿入順を保持する。
    """

    def __init__(self, resource_name: str) -> None:
        self._resource_name = resource_name
        self._items: dict[ID, T] = {}

    def add(self, aggregate: T) -> None:
        """新規登録する（同じ ID が既にあれば DuplicateResourceException）"""
        if aggregate.id in self._items:
            raise DuplicateResourceException(
                f"{self._resource_name} already exists: {aggregate.id}"
            )
        self._items[aggregate.id] = aggregate

    def put(self, aggregate: T) -> None:
        self._items[aggregate.id] = aggregate

    def get(self, id: ID) -> T | None:
        return self._items.get(id)

    def values(self) -> list[T]:
        return list(self._items.values())

    def remove(self, id: ID) -> None:
        self._items.pop(id, None)

    def __contains__(self, id: object) -> bool:
        return id in self._items
