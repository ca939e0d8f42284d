import pytest

from hotel_management.rooms.infrastructure import InMemoryRoomRegistry
from hotel_management.shared_kernel import DuplicateKeyError, RoomStatus


@pytest.fixture
def registry() -> InMemoryRoomRegistry:
    return InMemoryRoomRegistry()


def test_added_room_is_available(registry: InMemoryRoomRegistry):
    """Тест: новый номер регистрируется свободным."""
    room = registry.add_room(101, "Single")

    assert room.status == RoomStatus.AVAILABLE
    assert registry.check_availability(101) is True
    assert registry.get(101) is room


def test_duplicate_room_number_is_rejected(registry: InMemoryRoomRegistry):
    """Тест: повторная регистрация номера вызывает ошибку."""
    registry.add_room(101, "Single")

    with pytest.raises(DuplicateKeyError, match="Room with number 101 already exists"):
        registry.add_room(101, "Double")

    assert registry.get(101).type == "Single"


def test_check_availability_for_unknown_and_occupied_room(
    registry: InMemoryRoomRegistry,
):
    """Тест: неизвестный и занятый номер одинаково недоступны."""
    registry.add_room(101, "Single")
    registry.update_status(101, RoomStatus.OCCUPIED)

    assert registry.check_availability(101) is False
    assert registry.check_availability(999) is False


def test_update_status_of_unknown_room_is_noop(registry: InMemoryRoomRegistry):
    registry.add_room(101, "Single")

    registry.update_status(999, RoomStatus.OCCUPIED)

    assert registry.check_availability(101) is True
    assert registry.get(999) is None


def test_remove_room(registry: InMemoryRoomRegistry):
    """Тест: удаленный номер больше не доступен."""
    registry.add_room(101, "Single")

    assert registry.remove_room(101) is True
    assert registry.check_availability(101) is False
    assert registry.remove_room(101) is False


def test_room_can_be_added_again_after_removal(registry: InMemoryRoomRegistry):
    """Тест: доступность определяется последней зарегистрированной записью."""
    registry.add_room(101, "Single")
    registry.update_status(101, RoomStatus.OCCUPIED)
    registry.remove_room(101)

    registry.add_room(101, "Double")

    assert registry.check_availability(101) is True
    assert registry.get(101).type == "Double"


def test_list_available_keeps_registration_order(registry: InMemoryRoomRegistry):
    """Тест: список свободных номеров в порядке регистрации, без занятых."""
    registry.add_room(303, "Double")
    registry.add_room(101, "Single")
    registry.add_room(202, "Single")
    registry.update_status(101, RoomStatus.OCCUPIED)

    available = registry.list_available()

    assert [room.number for room in available] == [303, 202]
    # Чтение не изменяет реестр
    assert len(registry) == 3


def test_snapshot_is_independent_copy(registry: InMemoryRoomRegistry):
    """Тест: снимок не меняется вместе с реестром и восстанавливает его."""
    registry.add_room(101, "Single")
    state = registry.snapshot()

    registry.update_status(101, RoomStatus.OCCUPIED)
    registry.add_room(102, "Double")
    registry.restore(state)

    assert registry.check_availability(101) is True
    assert registry.get(102) is None
