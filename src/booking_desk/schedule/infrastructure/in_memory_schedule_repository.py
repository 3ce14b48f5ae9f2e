from booking_desk.schedule.domain.entity import Schedule
from booking_desk.schedule.domain.repository import ScheduleRepository
from booking_desk.schedule.domain.value_object import ScheduleId
from booking_desk.shared.infrastructure import InMemoryStore


class InMemoryScheduleRepository(ScheduleRepository):
    """プロセス内メモリを使用した ScheduleRepository の具象実装"""

    def __init__(self) -> None:
        self._store: InMemoryStore[Schedule, ScheduleId] = InMemoryStore("Schedule")

    def add(self, schedule: Schedule) -> None:
        self._store.add(schedule)

    def save(self, schedule: Schedule) -> None:
        self._store.put(schedule)

    def find_by_id(self, schedule_id: ScheduleId) -> Schedule | None:
        return self._store.get(schedule_id)

    def find_all(self) -> list[Schedule]:
        return self._store.values()

    def delete(self, schedule_id: ScheduleId) -> None:
        self._store.remove(schedule_id)
