from unittest.mock import MagicMock

import pytest

from booking_desk.booking.domain.value_object import BookingId
from booking_desk.desk.handlers import menu
from booking_desk.desk.handlers.menu import run_menu
from booking_desk.passenger.domain.value_object import PassportNumber


@pytest.fixture
def run(session):
    """入力を順に与えてメニューを実行し、(終了コード, 出力行) を返す"""

    def _run(*inputs: str) -> tuple[int, list[str]]:
        remaining = list(inputs)
        output: list[str] = []

        def read(prompt: str) -> str:
            if not remaining:
                raise EOFError
            return remaining.pop(0)

        exit_code = run_menu(session, read=read, write=output.append)
        return exit_code, output

    return _run


class TestRunMenu:
    def test_exit(self, run):
        exit_code, output = run("11")
        assert exit_code == 0
        assert output[-1] == "Exiting..."

    def test_end_of_input_exits_normally(self, run):
        exit_code, output = run()
        assert exit_code == 0
        assert output[-1] == "Exiting..."

    def test_invalid_choice_loops(self, run):
        exit_code, output = run("42", "abc", "11")
        assert exit_code == 0
        assert output.count("Invalid choice. Please try again.") == 2

    def test_show_itinerary(self, run):
        _, output = run("1", "11")
        assert "Itinerary ID: I123" in output
        assert "Booking ID: B123, Seat Number: 12A, Status: Confirmed" in output
        assert "Booking ID: B456, Seat Number: 14B, Status: Confirmed" in output

    def test_show_schedule(self, run):
        _, output = run("2", "11")
        assert "Schedule ID: S123, Date: 2023-06-15" in output
        assert any(line.startswith("Flight Number: FL456") for line in output)

    def test_show_passengers_by_flight_type(self, run):
        _, output = run("3", "11")
        domestic = output.index("Passengers on Domestic Flights:")
        international = output.index("Passengers on International Flights:")
        assert domestic < output.index("Passengers on flight FL123:") < international
        assert output.index("Passengers on flight FL456:") > international

    def test_modify_passenger_email(self, run, session):
        _, output = run("4", "P12345", "1", "john.doe@example.org", "11")
        assert "Passenger information updated." in output
        passenger = session.passengers.find_by_id(PassportNumber("P12345"))
        assert passenger.email == "john.doe@example.org"

    def test_modify_passenger_invalid_email_is_rejected(self, run, session):
        """登録時と同じく、不正なメールアドレスには変更できないこと"""
        _, output = run("4", "P12345", "1", "not-an-email", "11")
        assert any(line.startswith("Invalid input: value") for line in output)
        assert "Passenger information updated." not in output
        passenger = session.passengers.find_by_id(PassportNumber("P12345"))
        assert passenger.email == "john@example.com"

    def test_modify_passenger_invalid_phone_number_is_rejected(self, run, session):
        """登録時と同じく、不正な電話番号には変更できないこと"""
        _, output = run("4", "P12345", "2", "call-me", "11")
        assert any(line.startswith("Invalid input: value") for line in output)
        passenger = session.passengers.find_by_id(PassportNumber("P12345"))
        assert passenger.phone_number == "1234567890"

    def test_modify_passenger_phone_number(self, run, session):
        _, output = run("4", "P12345", "2", "+1 555-0100", "11")
        assert "Passenger information updated." in output
        passenger = session.passengers.find_by_id(PassportNumber("P12345"))
        assert passenger.phone_number == "+1 555-0100"

    def test_modify_unknown_passenger(self, run):
        _, output = run("4", "P00000", "11")
        assert "Passenger not found: P00000" in output

    def test_notify_passengers(self, run):
        _, output = run("5", "11")
        assert (
            "Passenger John Doe received update: "
            "This is a notification for domestic flight."
        ) in output
        assert (
            "Passenger Jane Smith received update: "
            "This is a notification for international flight."
        ) in output

    def test_add_passenger(self, run, session):
        _, output = run(
            "6", "Alice Brown", "alice@example.com", "5551234567", "P77777", "11"
        )
        assert "Passenger added successfully!" in output
        assert session.passengers.find_by_id(PassportNumber("P77777")) is not None

    def test_add_passenger_invalid_email(self, run, session):
        _, output = run("6", "Alice", "not-an-email", "5551234567", "P77777", "11")
        assert any(line.startswith("Invalid input: email") for line in output)
        assert session.passengers.find_by_id(PassportNumber("P77777")) is None

    def test_add_duplicate_passenger(self, run):
        _, output = run("6", "John", "j@example.com", "5551234567", "P12345", "11")
        assert "Passenger already exists: P12345" in output

    def test_book_flight(self, run, session):
        _, output = run("7", "P54321", "FL123", "3C", "B789", "11")
        assert "Flight booked successfully!" in output
        assert (
            "Passenger John Doe received update: Booking confirmed for flight "
            "New York to Los Angeles for passenger Jane Smith"
        ) in output
        assert session.bookings.find_by_id(BookingId("B789")) is not None

    def test_book_unknown_flight_reports_not_found(self, run, session):
        _, output = run("7", "P54321", "FL999", "11")
        assert "Flight not found: FL999" in output
        assert len(session.bookings.find_all()) == 2

    def test_cancel_booking_then_itinerary(self, run):
        _, output = run("8", "B123", "1", "11")
        assert "Booking cancelled successfully!" in output
        itinerary_start = output.index("Itinerary ID: I123")
        assert not any(
            line.startswith("Booking ID: B123") for line in output[itinerary_start:]
        )

    def test_cancel_unknown_booking(self, run):
        _, output = run("8", "B999", "11")
        assert "Booking not found: B999" in output

    def test_view_passenger(self, run):
        _, output = run("9", "P54321", "11")
        assert (
            "Name: Jane Smith, Email: jane@example.com, Phone Number: 0987654321\n"
            "Passport Number: P54321"
        ) in output

    def test_view_flight(self, run):
        _, output = run("10", "FL456", "11")
        assert "Type: International, Fare: 200.00 USD, Available: Yes" in output

    def test_view_unknown_flight(self, run):
        _, output = run("10", "FL999", "11")
        assert "Flight not found: FL999" in output


class TestRunMenuLogging:
    """処理済みの失敗は WARNING で記録されること"""

    @pytest.fixture
    def menu_logger(self, monkeypatch):
        logger = MagicMock()
        monkeypatch.setattr(menu, "logger", logger)
        return logger

    def test_domain_error_is_logged_as_warning(self, run, menu_logger):
        run("9", "P00000", "11")

        menu_logger.warning.assert_called_once()
        assert menu_logger.warning.call_args.kwargs["extra"] == {
            "choice": "9",
            "error_type": "PassengerNotFoundException",
        }
        menu_logger.exception.assert_not_called()

    def test_validation_error_is_logged_as_warning(self, run, menu_logger):
        run("4", "P12345", "1", "not-an-email", "11")

        menu_logger.warning.assert_called_once()
        assert menu_logger.warning.call_args.args[0] == "Invalid operator input"
        menu_logger.exception.assert_not_called()
