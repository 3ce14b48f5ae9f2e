from .schedule_repository import ScheduleRepository

__all__ = ["ScheduleRepository"]
