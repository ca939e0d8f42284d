"""
Тесты единицы работы: все шаги сценария применяются целиком или не применяются.
"""

import pytest

from hotel_management.accounting.infrastructure import InMemoryBillingEngine
from hotel_management.booking.domain import Booking, RoomBooked
from hotel_management.booking.infrastructure import InMemoryBookingLedger
from hotel_management.customers.infrastructure import InMemoryCustomerDirectory
from hotel_management.reservations.infrastructure import InMemoryReservationQueue
from hotel_management.rooms.infrastructure import InMemoryRoomRegistry
from hotel_management.session.application import HotelSession
from hotel_management.session.infrastructure import HotelUnitOfWork
from hotel_management.shared_kernel import (
    BusinessRuleValidationException,
    ErrorCode,
    InMemoryEventBus,
    RoomStatus,
)


class RejectingCustomerDirectory(InMemoryCustomerDirectory):
    """Справочник, отказывающий в регистрации новых клиентов."""

    def add(self, name, contact_info):
        raise BusinessRuleValidationException("registration closed")


class BrokenCancelLedger(InMemoryBookingLedger):
    """Журнал, в котором удаление записи всегда завершается ошибкой."""

    def cancel(self, booking_id):
        Booking(id=booking_id, room_number="not-a-number", customer_name="x")
        return super().cancel(booking_id)


def test_injected_empty_stores_are_used():
    """Тест: пустые переданные хранилища не заменяются новыми."""
    rooms = InMemoryRoomRegistry()
    customers = InMemoryCustomerDirectory()
    bookings = InMemoryBookingLedger()
    billing = InMemoryBillingEngine()
    reservations = InMemoryReservationQueue()

    uow = HotelUnitOfWork(
        rooms=rooms,
        customers=customers,
        bookings=bookings,
        billing=billing,
        reservations=reservations,
    )

    assert uow.rooms is rooms
    assert uow.customers is customers
    assert uow.bookings is bookings
    assert uow.billing is billing
    assert uow.reservations is reservations


def test_failed_step_rolls_back_booking():
    """Тест: сбой на шаге клиента откатывает статус номера и запись в журнале."""
    uow = HotelUnitOfWork(customers=RejectingCustomerDirectory())
    session = HotelSession(uow)
    session.add_room(101, "Single")

    result = session.book_room("B1", 101, "Alice")

    assert not result.ok
    assert result.error == ErrorCode.INVALID_ARGUMENT
    assert uow.rooms.get(101).status == RoomStatus.AVAILABLE
    assert uow.bookings.get("B1") is None
    assert not uow.in_progress


def test_rollback_discards_pending_events():
    bus = InMemoryEventBus()
    received = []
    bus.subscribe(RoomBooked, received.append)
    uow = HotelUnitOfWork(customers=RejectingCustomerDirectory(), event_bus=bus)
    session = HotelSession(uow)
    session.add_room(101, "Single")

    session.book_room("B1", 101, "Alice")

    assert received == []


def test_context_manager_restores_all_stores():
    uow = HotelUnitOfWork()
    uow.rooms.add_room(101, "Single")
    uow.billing.set_rate("Single", 100.0)

    with pytest.raises(RuntimeError):
        with uow:
            uow.rooms.update_status(101, RoomStatus.OCCUPIED)
            uow.bookings.book("B1", 101, "Alice")
            uow.customers.add("Alice", "N/A")
            uow.billing.calculate_bill("B1", "Single", 2)
            uow.reservations.add("R1")
            raise RuntimeError("boom")

    assert uow.rooms.check_availability(101)
    assert uow.bookings.get("B1") is None
    assert uow.customers.find("Alice") is None
    assert uow.billing.generate_invoice("B1") is None
    assert uow.reservations.process() is None


def test_commit_keeps_changes_and_publishes():
    bus = InMemoryEventBus()
    received = []
    bus.subscribe(RoomBooked, received.append)
    uow = HotelUnitOfWork(event_bus=bus)

    with uow:
        uow.bookings.book("B1", 101, "Alice")
        uow.collect(RoomBooked(booking_id="B1", room_number=101, customer_name="Alice"))
        # До фиксации события не публикуются
        assert received == []

    assert uow.bookings.get("B1") is not None
    assert len(received) == 1


def test_nested_begin_is_rejected():
    uow = HotelUnitOfWork()

    with uow:
        with pytest.raises(RuntimeError, match="already in progress"):
            uow.begin()


def test_failing_event_handler_does_not_break_booking(session: HotelSession, event_bus):
    def broken_handler(event):
        raise ValueError("handler failure")

    event_bus.subscribe(RoomBooked, broken_handler)
    session.add_room(101, "Single")

    result = session.book_room("B1", 101, "Alice")

    assert result.ok
    assert session.check_availability(101) is False


def test_failed_cancel_keeps_booking_and_room():
    """Тест: ошибка при удалении записи откатывает освобождение номера."""
    uow = HotelUnitOfWork(bookings=BrokenCancelLedger())
    session = HotelSession(uow)
    session.add_room(101, "Single")
    session.book_room("B1", 101, "Alice")

    result = session.cancel_booking("B1")

    assert not result.ok
    assert result.error == ErrorCode.INVALID_ARGUMENT
    assert uow.rooms.get(101).status == RoomStatus.OCCUPIED
    assert uow.bookings.get("B1") is not None
    assert not uow.in_progress
