"""
Интерфейсы (порты) для контекста клиентов.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Protocol

from .domain import Customer


class ICustomerDirectory(Protocol):
    """Интерфейс справочника клиентов."""

    def add(self, name: str, contact_info: str) -> Customer: ...
    def remove(self, name: str) -> bool: ...
    def find(self, name: str) -> Optional[Customer]: ...
    def list_all(self) -> List[Customer]: ...
    def snapshot(self) -> Dict[str, Any]: ...
    def restore(self, state: Dict[str, Any]) -> None: ...
