from booking_desk.shared.domain import ResourceNotFoundException


class ScheduleNotFoundException(ResourceNotFoundException):
    def __init__(self, schedule_id: object) -> None:
        super().__init__(f"Schedule not found: {schedule_id}")
        self.schedule_id = schedule_id
