"""Entity change events."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Generic, TypeVar

import pytz

T = TypeVar("T")


@dataclass(frozen=True)
class EntityEvent(Generic[T]):
    """Base event carrying the affected entity."""

    entity: T
    occurred_at: datetime = field(default_factory=lambda: datetime.now(pytz.utc))


@dataclass(frozen=True)
class EntityInsertedEvent(EntityEvent[T]):
    pass


@dataclass(frozen=True)
class EntityUpdatedEvent(EntityEvent[T]):
    pass


@dataclass(frozen=True)
class EntityDeletedEvent(EntityEvent[T]):
    pass
