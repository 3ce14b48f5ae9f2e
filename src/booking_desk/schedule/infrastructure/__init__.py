from .in_memory_schedule_repository import InMemoryScheduleRepository

__all__ = ["InMemoryScheduleRepository"]
