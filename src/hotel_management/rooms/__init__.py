"""
Модуль контекста номеров (Rooms Context).

Отвечает за учет номерного фонда и статуса занятости номеров.
"""

from . import domain, infrastructure, interfaces

__all__ = [
    "domain",
    "infrastructure",
    "interfaces",
]
