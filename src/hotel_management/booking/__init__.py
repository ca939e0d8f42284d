"""
Модуль контекста бронирования (Booking Context).

Отвечает за журнал бронирований: соответствие идентификатора
бронирования паре (номер комнаты, имя клиента).
"""

from . import domain, infrastructure, interfaces

__all__ = [
    "domain",
    "infrastructure",
    "interfaces",
]
