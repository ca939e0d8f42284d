"""
Инфраструктурный слой контекста номеров.

Реестр номеров в памяти. Словарь сохраняет порядок вставки, поэтому
порядок регистрации номеров совпадает с порядком выдачи списков.
"""

from typing import Any, Dict, List, Optional

from ..shared_kernel import DuplicateKeyError, RoomStatus
from . import interfaces as ports
from .domain import Room


class InMemoryRoomRegistry(ports.IRoomRegistry):
    """Реализация реестра номеров в памяти."""

    def __init__(self) -> None:
        self._rooms: Dict[int, Room] = {}

    def add_room(self, number: int, room_type: str) -> Room:
        if number in self._rooms:
            raise DuplicateKeyError(f"Room with number {number} already exists")
        room = Room(number=number, type=room_type)
        self._rooms[number] = room
        return room

    def remove_room(self, number: int) -> bool:
        return self._rooms.pop(number, None) is not None

    def get(self, number: int) -> Optional[Room]:
        return self._rooms.get(number)

    def check_availability(self, number: int) -> bool:
        # Не различает "нет такого номера" и "номер занят"
        room = self._rooms.get(number)
        return room is not None and room.is_available

    def update_status(self, number: int, status: RoomStatus) -> None:
        room = self._rooms.get(number)
        if room is not None:
            room.status = status

    def list_available(self) -> List[Room]:
        return [room for room in self._rooms.values() if room.is_available]

    def list_all(self) -> List[Room]:
        return list(self._rooms.values())

    def snapshot(self) -> Dict[str, Any]:
        """Возвращает независимую копию состояния реестра."""
        return {
            "rooms": {
                number: room.model_copy(deep=True)
                for number, room in self._rooms.items()
            }
        }

    def restore(self, state: Dict[str, Any]) -> None:
        """Восстанавливает состояние из снимка."""
        self._rooms = dict(state["rooms"])

    def __len__(self) -> int:
        return len(self._rooms)
