from .in_memory_booking_repository import InMemoryBookingRepository

__all__ = ["InMemoryBookingRepository"]
