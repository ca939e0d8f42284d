import pytest
from pydantic import ValidationError

from hotel_management.customers.domain import Customer
from hotel_management.customers.infrastructure import InMemoryCustomerDirectory
from hotel_management.shared_kernel import DuplicateKeyError


@pytest.fixture
def directory() -> InMemoryCustomerDirectory:
    return InMemoryCustomerDirectory()


def test_new_customer_has_empty_history(directory: InMemoryCustomerDirectory):
    """Тест: новый клиент создается с пустой историей бронирований."""
    directory.add("Bob", "555-0000")

    customer = directory.find("Bob")

    assert customer is not None
    assert customer.contact_info == "555-0000"
    assert customer.booking_history == []


def test_find_returns_live_record(directory: InMemoryCustomerDirectory):
    """Тест: изменения через найденную запись видны справочнику."""
    directory.add("Bob", "555-0000")

    directory.find("Bob").add_booking("B1")
    directory.find("Bob").add_booking("B2")

    assert directory.find("Bob").booking_history == ["B1", "B2"]


def test_find_unknown_customer(directory: InMemoryCustomerDirectory):
    assert directory.find("Nobody") is None


def test_duplicate_name_is_rejected(directory: InMemoryCustomerDirectory):
    directory.add("Bob", "555-0000")

    with pytest.raises(DuplicateKeyError):
        directory.add("Bob", "555-1111")

    assert directory.find("Bob").contact_info == "555-0000"


def test_remove_customer(directory: InMemoryCustomerDirectory):
    directory.add("Bob", "555-0000")

    assert directory.remove("Bob") is True
    assert directory.find("Bob") is None
    assert directory.remove("Bob") is False


def test_customer_name_must_not_be_empty():
    with pytest.raises(ValidationError):
        Customer(name="", contact_info="N/A")
