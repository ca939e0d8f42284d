"""
Инфраструктурный слой сессии.

Единица работы объединяет все хранилища. На входе в блок снимается
снимок состояния каждого хранилища; при исключении состояние
восстанавливается целиком, поэтому частично примененный сценарий
бронирования или отмены снаружи не наблюдается.
"""

from typing import Any, Dict, List, Optional

from ..accounting.infrastructure import InMemoryBillingEngine
from ..accounting.interfaces import IBillingEngine
from ..booking.infrastructure import InMemoryBookingLedger
from ..booking.interfaces import IBookingLedger
from ..customers.infrastructure import InMemoryCustomerDirectory
from ..customers.interfaces import ICustomerDirectory
from ..reservations.infrastructure import InMemoryReservationQueue
from ..reservations.interfaces import IReservationQueue
from ..rooms.infrastructure import InMemoryRoomRegistry
from ..rooms.interfaces import IRoomRegistry
from ..shared_kernel import ConsoleLogger, DomainEvent, InMemoryEventBus
from ..shared_kernel import interfaces as kernel_ports


class HotelUnitOfWork:
    """Единица работы над всеми хранилищами сессии."""

    def __init__(
        self,
        rooms: Optional[IRoomRegistry] = None,
        customers: Optional[ICustomerDirectory] = None,
        bookings: Optional[IBookingLedger] = None,
        billing: Optional[IBillingEngine] = None,
        reservations: Optional[IReservationQueue] = None,
        event_bus: Optional[kernel_ports.IEventBus] = None,
        logger: Optional[kernel_ports.ILogger] = None,
    ):
        self._logger = logger if logger is not None else ConsoleLogger(__name__)
        # Пустое хранилище ложно из-за __len__, поэтому сравнение только с None
        self._rooms = rooms if rooms is not None else InMemoryRoomRegistry()
        self._customers = (
            customers if customers is not None else InMemoryCustomerDirectory()
        )
        self._bookings = bookings if bookings is not None else InMemoryBookingLedger()
        self._billing = (
            billing
            if billing is not None
            else InMemoryBillingEngine(logger=self._logger)
        )
        self._reservations = (
            reservations if reservations is not None else InMemoryReservationQueue()
        )
        self._event_bus = (
            event_bus
            if event_bus is not None
            else InMemoryEventBus(logger=self._logger)
        )
        self._snapshot: Optional[Dict[str, Dict[str, Any]]] = None
        self._pending_events: List[DomainEvent] = []

    @property
    def rooms(self) -> IRoomRegistry:
        return self._rooms

    @property
    def customers(self) -> ICustomerDirectory:
        return self._customers

    @property
    def bookings(self) -> IBookingLedger:
        return self._bookings

    @property
    def billing(self) -> IBillingEngine:
        return self._billing

    @property
    def reservations(self) -> IReservationQueue:
        return self._reservations

    @property
    def event_bus(self) -> kernel_ports.IEventBus:
        return self._event_bus

    @property
    def in_progress(self) -> bool:
        return self._snapshot is not None

    def _stores(self) -> Dict[str, Any]:
        return {
            "rooms": self._rooms,
            "customers": self._customers,
            "bookings": self._bookings,
            "billing": self._billing,
            "reservations": self._reservations,
        }

    def begin(self) -> None:
        """Снимает снимок состояния всех хранилищ."""
        if self._snapshot is not None:
            raise RuntimeError("HotelUnitOfWork is already in progress")
        self._snapshot = {
            name: store.snapshot() for name, store in self._stores().items()
        }
        self._pending_events = []

    def collect(self, event: DomainEvent) -> None:
        """Откладывает публикацию события до фиксации."""
        self._pending_events.append(event)

    def commit(self) -> None:
        """Фиксирует изменения и публикует накопленные события."""
        self._snapshot = None
        events, self._pending_events = self._pending_events, []
        self._logger.debug("HotelUnitOfWork committed", events=len(events))
        for event in events:
            self._event_bus.publish(event)

    def rollback(self) -> None:
        """Возвращает все хранилища к состоянию на момент begin()."""
        if self._snapshot is not None:
            for name, store in self._stores().items():
                store.restore(self._snapshot[name])
        self._snapshot = None
        self._pending_events = []
        self._logger.warning("HotelUnitOfWork rolled back")

    def __enter__(self) -> "HotelUnitOfWork":
        self.begin()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self.commit()
        else:
            self.rollback()
        return False  # Пробрасываем исключение дальше, если оно было
