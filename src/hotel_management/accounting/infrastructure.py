"""
Инфраструктурный слой контекста учета.
"""

from typing import Any, Dict, Optional

from ..shared_kernel import ConsoleLogger
from ..shared_kernel import interfaces as kernel_ports
from . import interfaces as ports
from .domain import Invoice, RoomRate


class InMemoryBillingEngine(ports.IBillingEngine):
    """Таблица тарифов и счета в памяти."""

    def __init__(self, logger: Optional[kernel_ports.ILogger] = None) -> None:
        self._rates: Dict[str, RoomRate] = {}
        self._invoices: Dict[str, Invoice] = {}
        self._logger = logger or ConsoleLogger(__name__)

    def set_rate(self, room_type: str, rate: float) -> None:
        # RoomRate отклоняет отрицательный тариф (ValidationError)
        self._rates[room_type] = RoomRate(room_type=room_type, rate=rate)

    def get_rate(self, room_type: str) -> Optional[float]:
        room_rate = self._rates.get(room_type)
        return room_rate.rate if room_rate is not None else None

    def rates(self) -> Dict[str, float]:
        return {room_type: item.rate for room_type, item in self._rates.items()}

    def calculate_bill(self, booking_id: str, room_type: str, days: int) -> float:
        rate = self.get_rate(room_type)
        if rate is None:
            # Неизвестный тип номера считается по нулевому тарифу
            self._logger.warning(
                "No rate configured for room type, billing at 0.0",
                room_type=room_type,
                booking_id=booking_id,
            )
            rate = 0.0

        invoice = Invoice.calculate(
            booking_id=booking_id, room_type=room_type, rate=rate, days=days
        )
        self._invoices[booking_id] = invoice
        return invoice.amount

    def generate_invoice(self, booking_id: str) -> Optional[Invoice]:
        return self._invoices.get(booking_id)

    def snapshot(self) -> Dict[str, Any]:
        """Возвращает независимую копию тарифов и счетов."""
        return {
            "rates": dict(self._rates),
            "invoices": {
                booking_id: invoice.model_copy(deep=True)
                for booking_id, invoice in self._invoices.items()
            },
        }

    def restore(self, state: Dict[str, Any]) -> None:
        """Восстанавливает состояние из снимка."""
        self._rates = dict(state["rates"])
        self._invoices = dict(state["invoices"])
