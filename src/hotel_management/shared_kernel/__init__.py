"""
Общее ядро (Shared Kernel) системы управления отелем.

Содержит общие типы данных и утилиты, используемые во всех контекстах.
"""

from .domain import (
    BusinessRuleValidationException,
    DomainEvent,
    # Исключения
    DomainException,
    DuplicateKeyError,
    ErrorCode,
    OperationResult,
    # Перечисления
    RoomStatus,
    # Утилиты
    generate_id,
    now,
)
from .infrastructure import ConsoleLogger, InMemoryEventBus, configure_logging

__all__ = [
    "DomainEvent",
    "OperationResult",
    # Перечисления
    "RoomStatus",
    "ErrorCode",
    # Исключения
    "DomainException",
    "BusinessRuleValidationException",
    "DuplicateKeyError",
    # Инфраструктура
    "ConsoleLogger",
    "InMemoryEventBus",
    "configure_logging",
    # Утилиты
    "generate_id",
    "now",
]
