"""
Инфраструктурный слой контекста бронирования.

Журнал не выполняет перекрестных проверок: доступность номера и
уникальность идентификатора проверяет сессия до вызова book().
"""

from typing import Any, Dict, List, Optional

from . import interfaces as ports
from .domain import Booking


class InMemoryBookingLedger(ports.IBookingLedger):
    """Реализация журнала бронирований в памяти."""

    def __init__(self) -> None:
        self._bookings: Dict[str, Booking] = {}

    def book(self, booking_id: str, room_number: int, customer_name: str) -> Booking:
        # Существующая запись с тем же идентификатором перезаписывается
        booking = Booking(
            id=booking_id, room_number=room_number, customer_name=customer_name
        )
        self._bookings[booking_id] = booking
        return booking

    def cancel(self, booking_id: str) -> bool:
        return self._bookings.pop(booking_id, None) is not None

    def get(self, booking_id: str) -> Optional[Booking]:
        return self._bookings.get(booking_id)

    def find_by_room(self, room_number: int) -> List[Booking]:
        return [
            booking
            for booking in self._bookings.values()
            if booking.room_number == room_number
        ]

    def list_all(self) -> List[Booking]:
        return list(self._bookings.values())

    def snapshot(self) -> Dict[str, Any]:
        """Возвращает независимую копию состояния журнала."""
        return {
            "bookings": {
                booking_id: booking.model_copy(deep=True)
                for booking_id, booking in self._bookings.items()
            }
        }

    def restore(self, state: Dict[str, Any]) -> None:
        """Восстанавливает состояние из снимка."""
        self._bookings = dict(state["bookings"])

    def __contains__(self, booking_id: object) -> bool:
        return booking_id in self._bookings

    def __len__(self) -> int:
        return len(self._bookings)
