"""
Система управления отелем для одной сессии оператора.

Контексты:
- rooms: номерной фонд и статус занятости
- customers: клиенты и история бронирований
- booking: журнал бронирований
- accounting: тарифы и счета
- reservations: лист ожидания (FIFO)
- session: согласование контекстов между собой
"""

from .bootstrap import bootstrap_app
from .config import HotelSettings
from .session.application import HotelSession
from .session.infrastructure import HotelUnitOfWork

__all__ = [
    "bootstrap_app",
    "HotelSettings",
    "HotelSession",
    "HotelUnitOfWork",
]
