from typing import Any, Dict, Optional

from .accounting.infrastructure import InMemoryBillingEngine
from .config import HotelSettings
from .session.application import HotelSession
from .session.infrastructure import HotelUnitOfWork
from .shared_kernel import ConsoleLogger, InMemoryEventBus


def bootstrap_app(settings: Optional[HotelSettings] = None) -> Dict[str, Any]:
    """Создает и настраивает все компоненты приложения."""
    settings = settings or HotelSettings()
    logger = ConsoleLogger("hotel_management", level=settings.log_level)

    # 1. Создаем шину событий и хранилища
    event_bus = InMemoryEventBus(logger=logger)
    billing = InMemoryBillingEngine(logger=logger)
    for room_type, rate in settings.default_rates.items():
        billing.set_rate(room_type, rate)

    # 2. Единица работы владеет всеми хранилищами сессии
    uow = HotelUnitOfWork(billing=billing, event_bus=event_bus, logger=logger)

    # 3. Сессия получает зависимости явно
    session = HotelSession(uow=uow, settings=settings, logger=logger)

    return {
        "session": session,
        "uow": uow,
        "event_bus": event_bus,
        "settings": settings,
    }
