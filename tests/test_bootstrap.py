import pytest
from pydantic import ValidationError

from hotel_management import HotelSession, HotelSettings, bootstrap_app


def test_bootstrap_wires_components():
    """Тест: сборка приложения возвращает связанные компоненты."""
    app = bootstrap_app()

    assert isinstance(app["session"], HotelSession)
    assert app["session"].uow is app["uow"]
    assert app["uow"].event_bus is app["event_bus"]


def test_bootstrap_creates_independent_sessions():
    """Тест: у каждой сборки свое состояние, без глобальных хранилищ."""
    first = bootstrap_app()["session"]
    second = bootstrap_app()["session"]

    first.add_room(101, "Single")

    assert second.check_availability(101) is False


def test_custom_settings():
    settings = HotelSettings(
        default_rates={"Suite": 400.0},
        contact_placeholder="unknown",
        currency_symbol="€",
        log_level="debug",
    )
    session = bootstrap_app(settings)["session"]
    session.add_room(501, "Suite")
    session.book_room("B1", 501, "Dana")

    assert settings.log_level == "DEBUG"
    assert session.uow.billing.rates() == {"Suite": 400.0}
    assert session.view_customer("Dana").value.contact_info == "unknown"
    assert session.calculate_bill("B1", "Suite", 2).message == "Total Bill: €800.00"


def test_settings_reject_negative_rate():
    with pytest.raises(ValidationError):
        HotelSettings(default_rates={"Single": -10.0})


@pytest.mark.parametrize("rate", [float("inf"), float("nan")])
def test_settings_reject_non_finite_rate(rate):
    with pytest.raises(ValidationError):
        HotelSettings(default_rates={"Single": rate})


def test_settings_reject_unknown_log_level():
    with pytest.raises(ValidationError):
        HotelSettings(log_level="loud")
