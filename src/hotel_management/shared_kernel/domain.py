"""
Основные доменные типы и утилиты общего ядра.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


def generate_id() -> UUID:
    """Генерирует новый UUID."""
    return uuid4()


def now() -> datetime:
    """Возвращает текущую дату и время."""
    return datetime.now(timezone.utc)


# Общие перечисления
class RoomStatus(str, Enum):
    """Статусы номеров."""

    AVAILABLE = "available"
    OCCUPIED = "occupied"


class ErrorCode(str, Enum):
    """Коды ошибок, возвращаемые операциями сессии."""

    ROOM_NOT_FOUND = "room_not_found"
    ROOM_UNAVAILABLE = "room_unavailable"
    ROOM_ALREADY_EXISTS = "room_already_exists"
    ROOM_OCCUPIED = "room_occupied"
    BOOKING_NOT_FOUND = "booking_not_found"
    BOOKING_ALREADY_EXISTS = "booking_already_exists"
    CUSTOMER_NOT_FOUND = "customer_not_found"
    CUSTOMER_ALREADY_EXISTS = "customer_already_exists"
    INVOICE_NOT_FOUND = "invoice_not_found"
    QUEUE_EMPTY = "queue_empty"
    INVALID_ARGUMENT = "invalid_argument"


class OperationResult(BaseModel):
    """
    Результат операции сессии.

    Отсутствие сущности - обычный результат, а не исключение:
    в этом случае ok=False, а error содержит код из ErrorCode.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    ok: bool
    error: Optional[ErrorCode] = None
    message: str = ""
    value: Any = None
    details: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def success(cls, value: Any = None, message: str = "") -> "OperationResult":
        return cls(ok=True, value=value, message=message)

    @classmethod
    def failure(
        cls, error: ErrorCode, message: str, **details: Any
    ) -> "OperationResult":
        return cls(ok=False, error=error, message=message, details=details)

    def __bool__(self) -> bool:
        return self.ok


class DomainEvent(BaseModel):
    """Базовый класс для всех доменных событий."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    event_id: UUID = Field(default_factory=generate_id)
    occurred_on: datetime = Field(default_factory=now)


# Общие исключения
class DomainException(Exception):
    """Базовое исключение для доменных ошибок."""

    pass


class BusinessRuleValidationException(DomainException):
    """Исключение при нарушении бизнес-правил."""

    pass


class DuplicateKeyError(DomainException):
    """Запись с таким ключом уже существует в хранилище."""

    pass
