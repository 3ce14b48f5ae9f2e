from .schedule_date import ScheduleDate
from .schedule_id import ScheduleId

__all__ = ["ScheduleId", "ScheduleDate"]
