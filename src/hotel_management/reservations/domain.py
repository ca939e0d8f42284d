"""
Доменная модель листа ожидания.

Заявка на резервирование - просто идентификатор в очереди.
С номерами и бронированиями она не сверяется.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from ..shared_kernel import now


class ReservationRequest(BaseModel):
    """Заявка в листе ожидания."""

    id: str = Field(..., min_length=1)
    queued_at: datetime = Field(default_factory=now)
