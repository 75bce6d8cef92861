"""Event publisher interface and the in-process subscriber registry."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable

from src.common.events.entity_events import (
    EntityDeletedEvent,
    EntityEvent,
    EntityInsertedEvent,
    EntityUpdatedEvent,
)

logger = logging.getLogger(__name__)

EventHandler = Callable[[Any], None]


class IEventPublisher(ABC):
    @abstractmethod
    def publish(self, event: Any) -> None:
        """Delivers the event to its subscribers."""
        pass

    def entity_inserted(self, entity: Any) -> None:
        self.publish(EntityInsertedEvent(entity))

    def entity_updated(self, entity: Any) -> None:
        self.publish(EntityUpdatedEvent(entity))

    def entity_deleted(self, entity: Any) -> None:
        self.publish(EntityDeletedEvent(entity))


class EventPublisher(IEventPublisher):
    """
    Synchronous publisher. Handlers are registered by the hosting application
    against an event class and receive every event that is an instance of it.

    A failing handler is logged and skipped; delivery to the rest continues.
    """

    def __init__(self) -> None:
        self._subscriptions: list[tuple[type, EventHandler]] = []

    def subscribe(self, event_type: type, handler: EventHandler) -> None:
        self._subscriptions.append((event_type, handler))

    def unsubscribe(self, event_type: type, handler: EventHandler) -> bool:
        """Removes a subscription. Returns False if it was not registered."""
        try:
            self._subscriptions.remove((event_type, handler))
        except ValueError:
            return False
        return True

    def publish(self, event: Any) -> None:
        for event_type, handler in list(self._subscriptions):
            if not isinstance(event, event_type):
                continue
            try:
                handler(event)
            except Exception as e:
                handler_name = getattr(handler, "__name__", repr(handler))
                logger.error(f"Event handler {handler_name} failed for {type(event).__name__}: {e}")
                continue


def log_entity_event(event: EntityEvent) -> None:
    """Subscriber that writes entity changes to the application log."""
    entity = event.entity
    logger.info(f"{type(event).__name__}: {type(entity).__name__} id={getattr(entity, 'id', None)}")
