"""
Общие фикстуры для тестов.
"""

import pytest

from hotel_management import HotelSession, HotelSettings, bootstrap_app


@pytest.fixture
def app():
    """Собранное приложение с тарифами по умолчанию (Single=100, Double=150)."""
    return bootstrap_app(HotelSettings())


@pytest.fixture
def session(app) -> HotelSession:
    return app["session"]


@pytest.fixture
def uow(app):
    return app["uow"]


@pytest.fixture
def event_bus(app):
    return app["event_bus"]
