"""
Модуль контекста учета (Accounting Context).

Отвечает за таблицу тарифов и счета по бронированиям.
"""

from . import domain, infrastructure, interfaces

__all__ = [
    "domain",
    "infrastructure",
    "interfaces",
]
