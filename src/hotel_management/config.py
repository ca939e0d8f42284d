"""
Настройки сессии.

Настройки передаются явно при сборке приложения и не читаются
из переменных окружения или файлов.
"""

import math
from typing import Dict

from pydantic import BaseModel, Field, field_validator


class HotelSettings(BaseModel):
    """Параметры сессии управления отелем."""

    # Тарифы, которые заносятся в таблицу при старте
    default_rates: Dict[str, float] = Field(
        default_factory=lambda: {"Single": 100.0, "Double": 150.0}
    )
    log_level: str = "WARNING"
    # Контакт клиента, созданного автоматически при бронировании
    contact_placeholder: str = "N/A"
    currency_symbol: str = "$"

    @field_validator("default_rates")
    @classmethod
    def rates_are_finite_and_not_negative(
        cls, v: Dict[str, float]
    ) -> Dict[str, float]:
        for room_type, rate in v.items():
            if not math.isfinite(rate):
                raise ValueError(f"Тариф для типа {room_type} должен быть конечным числом")
            if rate < 0:
                raise ValueError(f"Тариф для типа {room_type} не может быть отрицательным")
        return v

    @field_validator("log_level")
    @classmethod
    def known_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Неизвестный уровень логирования: {v}")
        return level
