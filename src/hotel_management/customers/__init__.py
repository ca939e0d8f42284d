"""
Модуль контекста клиентов (Customers Context).

Отвечает за учет клиентов и истории их бронирований.
"""

from . import domain, infrastructure, interfaces

__all__ = [
    "domain",
    "infrastructure",
    "interfaces",
]
