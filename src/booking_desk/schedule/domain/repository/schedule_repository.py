from booking_desk.schedule.domain.entity import Schedule
from booking_desk.schedule.domain.value_object import ScheduleId
from booking_desk.shared.domain import Repository


class ScheduleRepository(Repository[Schedule, ScheduleId]):
    """運航スケジュールリポジトリのインターフェース"""
