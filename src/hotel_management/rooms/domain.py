"""
Доменная модель контекста номеров.
"""

from pydantic import BaseModel, Field

from ..shared_kernel import RoomStatus


class Room(BaseModel):
    """Номер в отеле."""

    number: int  # Номер комнаты, уникальный ключ реестра
    type: str = Field(..., min_length=1)  # Метка типа, например "Single"
    status: RoomStatus = RoomStatus.AVAILABLE

    @property
    def is_available(self) -> bool:
        return self.status == RoomStatus.AVAILABLE
