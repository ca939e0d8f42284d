"""
Интерфейсы (порты) для контекста бронирования.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Protocol

from .domain import Booking


class IBookingLedger(Protocol):
    """Интерфейс журнала бронирований."""

    def book(self, booking_id: str, room_number: int, customer_name: str) -> Booking: ...
    def cancel(self, booking_id: str) -> bool: ...
    def get(self, booking_id: str) -> Optional[Booking]: ...
    def find_by_room(self, room_number: int) -> List[Booking]: ...
    def list_all(self) -> List[Booking]: ...
    def snapshot(self) -> Dict[str, Any]: ...
    def restore(self, state: Dict[str, Any]) -> None: ...
