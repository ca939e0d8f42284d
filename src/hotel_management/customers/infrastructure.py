"""
Инфраструктурный слой контекста клиентов.
"""

from typing import Any, Dict, List, Optional

from ..shared_kernel import DuplicateKeyError
from . import interfaces as ports
from .domain import Customer


class InMemoryCustomerDirectory(ports.ICustomerDirectory):
    """Реализация справочника клиентов в памяти."""

    def __init__(self) -> None:
        self._customers: Dict[str, Customer] = {}

    def add(self, name: str, contact_info: str) -> Customer:
        if name in self._customers:
            raise DuplicateKeyError(f"Customer with name {name} already exists")
        customer = Customer(name=name, contact_info=contact_info)
        self._customers[name] = customer
        return customer

    def remove(self, name: str) -> bool:
        return self._customers.pop(name, None) is not None

    def find(self, name: str) -> Optional[Customer]:
        # Возвращается сама запись: изменения через нее видны справочнику
        return self._customers.get(name)

    def list_all(self) -> List[Customer]:
        return list(self._customers.values())

    def snapshot(self) -> Dict[str, Any]:
        """Возвращает независимую копию состояния справочника."""
        return {
            "customers": {
                name: customer.model_copy(deep=True)
                for name, customer in self._customers.items()
            }
        }

    def restore(self, state: Dict[str, Any]) -> None:
        """Восстанавливает состояние из снимка."""
        self._customers = dict(state["customers"])

    def __len__(self) -> int:
        return len(self._customers)
