"""
Модуль сессии оператора.

Согласует номера, бронирования, клиентов и счета в рамках одной сессии.
"""

from . import application, infrastructure

__all__ = [
    "application",
    "infrastructure",
]
