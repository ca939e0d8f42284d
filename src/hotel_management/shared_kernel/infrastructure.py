"""
Инфраструктура общего ядра: логгер и шина событий в памяти.
"""

import json
import logging
from typing import Any, Callable, Dict, List, Optional, Type

from . import interfaces as ports
from .domain import DomainEvent


class ConsoleLogger(ports.ILogger):
    """
    Реализация логгера поверх стандартного модуля logging.

    Контекст, переданный через kwargs, дописывается к сообщению в виде JSON.
    Вывод идет в stderr, чтобы не смешиваться с выводом меню.
    """

    def __init__(self, name: str = "hotel_management", level: Optional[str] = None):
        self._logger = logging.getLogger(name)
        if level is not None:
            self._logger.setLevel(level.upper())

    def _format(self, message: str, kwargs: Dict[str, Any]) -> str:
        if not kwargs:
            return message
        return f"{message} | {json.dumps(kwargs, default=str, ensure_ascii=False)}"

    def info(self, message: str, **kwargs: Any) -> None:
        self._logger.info(self._format(message, kwargs))

    def error(self, message: str, **kwargs: Any) -> None:
        self._logger.error(self._format(message, kwargs))

    def warning(self, message: str, **kwargs: Any) -> None:
        self._logger.warning(self._format(message, kwargs))

    def debug(self, message: str, **kwargs: Any) -> None:
        self._logger.debug(self._format(message, kwargs))


def configure_logging(level: str = "WARNING") -> None:
    """Настраивает корневой обработчик логов (stderr)."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


class InMemoryEventBus(ports.IEventBus):
    """Реализация шины событий в памяти."""

    def __init__(self, logger: Optional[ports.ILogger] = None):
        self._subscribers: Dict[Type[DomainEvent], List[Callable]] = {}
        self._logger = logger or ConsoleLogger()

    def publish(self, event: DomainEvent) -> None:
        """Публикует событие."""
        event_type = type(event)
        if event_type not in self._subscribers:
            self._logger.debug(f"No subscribers for event type {event_type.__name__}")
            return

        self._logger.info(
            f"Publishing event: {event_type.__name__}", event=event.model_dump()
        )

        for handler in self._subscribers[event_type]:
            # Ошибка обработчика не должна влиять на результат операции
            try:
                handler(event)
            except Exception as e:
                self._logger.error(
                    f"Error in event handler for {event_type.__name__}",
                    error=str(e),
                    event=event.model_dump(),
                )

    def subscribe(self, event_type: Type[DomainEvent], handler: Callable) -> None:
        """Подписывает обработчик на события указанного типа."""
        self._subscribers.setdefault(event_type, []).append(handler)
        self._logger.debug(f"Subscribed handler to {event_type.__name__} events")
