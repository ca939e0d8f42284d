"""
Интерфейсы (порты) для контекста учета.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Protocol

from .domain import Invoice


class IBillingEngine(Protocol):
    """Интерфейс расчета счетов."""

    def set_rate(self, room_type: str, rate: float) -> None: ...
    def get_rate(self, room_type: str) -> Optional[float]: ...
    def rates(self) -> Dict[str, float]: ...
    def calculate_bill(self, booking_id: str, room_type: str, days: int) -> float: ...
    def generate_invoice(self, booking_id: str) -> Optional[Invoice]: ...
    def snapshot(self) -> Dict[str, Any]: ...
    def restore(self, state: Dict[str, Any]) -> None: ...
