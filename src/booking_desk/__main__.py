import sys

from booking_desk.desk.config import DeskSettings
from booking_desk.desk.handlers.menu import run_menu
from booking_desk.desk.seed import seed_session
from booking_desk.desk.session import create_session


def main() -> int:
    """予約デスクを起動する"""
    settings = DeskSettings.from_env()
    session = create_session(settings)
    if settings.seed:
        seed_session(session)
    return run_menu(session)


if __name__ == "__main__":
    sys.exit(main())
