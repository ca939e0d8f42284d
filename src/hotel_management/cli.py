"""
Консольное меню оператора.

Тонкая обертка ввода-вывода: разбирает ввод, вызывает методы
HotelSession и печатает результат.
"""

from typing import Callable, Optional

from .bootstrap import bootstrap_app
from .config import HotelSettings
from .session.application import HotelSession
from .shared_kernel import configure_logging

MENU = """
Hotel Management System
1. Add Room
2. List Available Rooms
3. Book Room
4. Cancel Booking
5. Add Customer
6. View Customer Info
7. Calculate Bill
8. Queue Reservation
9. Exit"""

EXIT_CHOICE = 9


class InvalidNumber(ValueError):
    """Ввод не является целым числом."""


class HotelMenu:
    """Цикл меню, работающий поверх сессии."""

    def __init__(
        self,
        session: HotelSession,
        input_func: Optional[Callable[[str], str]] = None,
        output_func: Optional[Callable[[str], None]] = None,
    ):
        self._session = session
        self._input = input_func if input_func is not None else input
        self._output = output_func if output_func is not None else print
        self._actions = {
            1: self.add_room,
            2: self.list_available_rooms,
            3: self.book_room,
            4: self.cancel_booking,
            5: self.add_customer,
            6: self.view_customer,
            7: self.calculate_bill,
            8: self.queue_reservation,
        }

    def _ask(self, prompt: str) -> str:
        return self._input(prompt).strip()

    def _ask_int(self, prompt: str) -> int:
        raw = self._ask(prompt)
        try:
            return int(raw)
        except ValueError:
            raise InvalidNumber(raw) from None

    def _pause(self) -> None:
        self._input("\nPress Enter to continue...")

    def run(self) -> int:
        """Выполняет цикл меню до выбора пункта Exit. Возвращает код выхода."""
        while True:
            self._output(MENU)
            try:
                raw_choice = self._ask("Enter your choice: ")
            except EOFError:
                self._output("Exiting system...")
                return 0

            try:
                choice = int(raw_choice)
            except ValueError:
                choice = None

            if choice == EXIT_CHOICE:
                self._output("Exiting system...")
                return 0

            action = self._actions.get(choice)
            try:
                if action is None:
                    self._output("Invalid option. Please try again.")
                else:
                    try:
                        action()
                    except InvalidNumber:
                        self._output("Invalid number.")
                self._pause()
            except EOFError:
                self._output("Exiting system...")
                return 0

    def add_room(self) -> None:
        number = self._ask_int("Enter room number: ")
        room_type = self._ask("Enter room type (Single/Double): ")
        self._output(self._session.add_room(number, room_type).message)

    def list_available_rooms(self) -> None:
        self._output("\nAvailable rooms:")
        for room in self._session.list_available_rooms():
            self._output(room.describe())

    def book_room(self) -> None:
        booking_id = self._ask("Enter booking ID: ")
        room_number = self._ask_int("Enter room number: ")
        customer_name = self._ask("Enter customer name: ")
        result = self._session.book_room(booking_id, room_number, customer_name)
        self._output(result.message)

    def cancel_booking(self) -> None:
        booking_id = self._ask("Enter booking ID to cancel: ")
        self._output(self._session.cancel_booking(booking_id).message)

    def add_customer(self) -> None:
        name = self._ask("Enter customer name: ")
        contact = self._ask("Enter customer contact: ")
        self._output(self._session.add_customer(name, contact).message)

    def view_customer(self) -> None:
        name = self._ask("Enter customer name: ")
        result = self._session.view_customer(name)
        if not result.ok:
            self._output(result.message)
            return

        customer = result.value
        self._output(f"Customer Name: {customer.name}")
        self._output(f"Contact Info: {customer.contact_info}")
        self._output("Booking History:")
        for booking_id in customer.booking_history:
            self._output(booking_id)

    def calculate_bill(self) -> None:
        booking_id = self._ask("Enter booking ID: ")
        room_type = self._ask("Enter room type (Single/Double): ")
        days = self._ask_int("Enter number of days: ")
        self._output(self._session.calculate_bill(booking_id, room_type, days).message)

    def queue_reservation(self) -> None:
        reservation_id = self._ask("Enter reservation ID: ")
        self._output(self._session.queue_reservation(reservation_id).message)


def main(settings: Optional[HotelSettings] = None) -> int:
    """Точка входа консольного приложения."""
    settings = settings or HotelSettings()
    configure_logging(settings.log_level)
    app = bootstrap_app(settings)
    return HotelMenu(app["session"]).run()
