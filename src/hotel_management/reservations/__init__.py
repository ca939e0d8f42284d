"""
Модуль листа ожидания (Reservations Context).

Очередь заявок на резервирование, не связанная с остальными контекстами.
"""

from . import domain, infrastructure, interfaces

__all__ = [
    "domain",
    "infrastructure",
    "interfaces",
]
