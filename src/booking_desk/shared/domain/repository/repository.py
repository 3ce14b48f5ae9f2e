from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")
ID = TypeVar("ID")


class Repository(ABC, Generic[T, ID]):
    """Repository 基底クラス

    - 集約の保管を抽象化する
    - 集約の所有者はリポジトリのみ。他の集約からは ID で参照する
    """

    @abstractmethod
    def add(self, aggregate: T) -> None:
        """集約を新規登録する（ID が重複する場合は DuplicateResourceException）"""
        raise NotImplementedError

    @abstractmethod
    def save(self, aggregate: T) -> None:
        """集約を保存する（上書き）"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, id: ID) -> T | None:
        """IDで集約を検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[T]:
        """登録順に全件を返す"""
        raise NotImplementedError

    @abstractmethod
    def delete(self, id: ID) -> None:
        """集約を削除する（存在しなければ何もしない）"""
        raise NotImplementedError
