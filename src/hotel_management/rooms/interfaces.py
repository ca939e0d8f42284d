"""
Интерфейсы (порты) для контекста номеров.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Protocol

from ..shared_kernel import RoomStatus
from .domain import Room


class IRoomRegistry(Protocol):
    """Интерфейс реестра номеров."""

    def add_room(self, number: int, room_type: str) -> Room: ...
    def remove_room(self, number: int) -> bool: ...
    def get(self, number: int) -> Optional[Room]: ...
    def check_availability(self, number: int) -> bool: ...
    def update_status(self, number: int, status: RoomStatus) -> None: ...
    def list_available(self) -> List[Room]: ...
    def list_all(self) -> List[Room]: ...
    def snapshot(self) -> Dict[str, Any]: ...
    def restore(self, state: Dict[str, Any]) -> None: ...
