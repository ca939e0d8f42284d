"""
Инфраструктурный слой листа ожидания.
"""

from collections import deque
from typing import Any, Deque, Dict, List, Optional

from . import interfaces as ports
from .domain import ReservationRequest


class InMemoryReservationQueue(ports.IReservationQueue):
    """Очередь заявок в памяти."""

    def __init__(self) -> None:
        self._queue: Deque[ReservationRequest] = deque()

    def add(self, reservation_id: str) -> ReservationRequest:
        request = ReservationRequest(id=reservation_id)
        self._queue.append(request)
        return request

    def process(self) -> Optional[str]:
        """Извлекает первую заявку; None, если очередь пуста."""
        if not self._queue:
            return None
        return self._queue.popleft().id

    def pending(self) -> List[str]:
        return [request.id for request in self._queue]

    def snapshot(self) -> Dict[str, Any]:
        return {"queue": list(self._queue)}

    def restore(self, state: Dict[str, Any]) -> None:
        self._queue = deque(state["queue"])

    def __len__(self) -> int:
        return len(self._queue)
