"""
Доменная модель контекста бронирования.

Бронирование принадлежит только журналу бронирований. Номер и клиент
ссылаются на него по значению (номер комнаты, запись в истории клиента).
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from ..shared_kernel import DomainEvent, now


class Booking(BaseModel):
    """Бронирование номера в отеле."""

    id: str  # Задается оператором, журнал его не проверяет
    room_number: int
    customer_name: str
    created_at: datetime = Field(default_factory=now)


class RoomBooked(DomainEvent):
    """Событие создания бронирования."""

    booking_id: str
    room_number: int
    customer_name: str
    new_customer: bool = False


class BookingCancelled(DomainEvent):
    """Событие отмены бронирования."""

    booking_id: str
    room_number: int
    reason: Optional[str] = None
