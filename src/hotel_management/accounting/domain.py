"""
Доменная модель контекста учета.

Тарифы задаются по метке типа номера, сумма счета вычисляется
как тариф, умноженный на количество дней.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from ..shared_kernel import DomainEvent, now


class RoomRate(BaseModel):
    """Посуточный тариф для типа номера."""

    room_type: str = Field(..., min_length=1)
    rate: float = Field(..., ge=0, allow_inf_nan=False, description="Стоимость суток")


class Invoice(BaseModel):
    """Счет по бронированию."""

    booking_id: str = Field(..., min_length=1)
    room_type: str
    days: int = Field(..., ge=0)
    rate: float = Field(..., ge=0, allow_inf_nan=False)
    amount: float = Field(..., ge=0)
    calculated_at: datetime = Field(default_factory=now)

    @classmethod
    def calculate(
        cls, booking_id: str, room_type: str, rate: float, days: int
    ) -> "Invoice":
        """Создает счет с суммой rate * days."""
        return cls(
            booking_id=booking_id,
            room_type=room_type,
            days=days,
            rate=rate,
            amount=rate * days,
        )


class BillCalculated(DomainEvent):
    """Событие расчета (или пересчета) счета."""

    booking_id: str
    amount: float
