"""
Интерфейсы (порты) для листа ожидания.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Protocol

from .domain import ReservationRequest


class IReservationQueue(Protocol):
    """Интерфейс очереди заявок (FIFO)."""

    def add(self, reservation_id: str) -> ReservationRequest: ...
    def process(self) -> Optional[str]: ...
    def pending(self) -> List[str]: ...
    def snapshot(self) -> Dict[str, Any]: ...
    def restore(self, state: Dict[str, Any]) -> None: ...
    def __len__(self) -> int: ...
