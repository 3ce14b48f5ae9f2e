from .entity import Schedule
from .exception import ScheduleNotFoundException
from .repository import ScheduleRepository
from .value_object import ScheduleDate, ScheduleId

__all__ = [
    "Schedule",
    "ScheduleId",
    "ScheduleDate",
    "ScheduleRepository",
    "ScheduleNotFoundException",
]
