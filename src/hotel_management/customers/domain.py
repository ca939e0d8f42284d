"""
Доменная модель контекста клиентов.
"""

from typing import List

from pydantic import BaseModel, Field


class Customer(BaseModel):
    """Клиент отеля."""

    name: str = Field(..., min_length=1)  # Используется как ключ поиска
    contact_info: str
    # Идентификаторы бронирований в хронологическом порядке, только добавление
    booking_history: List[str] = Field(default_factory=list)

    def add_booking(self, booking_id: str) -> None:
        """Добавляет бронирование в историю клиента."""
        self.booking_history.append(booking_id)
