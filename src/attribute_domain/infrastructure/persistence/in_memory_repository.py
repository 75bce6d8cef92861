# attribute_domain/infrastructure/persistence/in_memory_repository.py
"""In-memory implementation of the generic repository."""

import copy
import itertools
import logging
import threading

from src.attribute_domain.domain.repositories.repository import IRepository, T

logger = logging.getLogger(__name__)


class InMemoryRepository(IRepository[T]):
    """
    Keeps copies of the stored entities keyed by id, so callers never share
    state with the store. Ids start at 1.
    """

    def __init__(self) -> None:
        self._rows: dict[int, T] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def table(self) -> list[T]:
        with self._lock:
            return [copy.copy(row) for row in self._rows.values()]

    def get_by_id(self, entity_id: int) -> T | None:
        with self._lock:
            row = self._rows.get(entity_id)
            return copy.copy(row) if row is not None else None

    def insert(self, entity: T) -> None:
        with self._lock:
            entity.id = next(self._ids)
            self._rows[entity.id] = copy.copy(entity)

    def update(self, entity: T) -> None:
        with self._lock:
            if entity.id not in self._rows:
                logger.warning(f"No rows affected updating {type(entity).__name__} {entity.id}")
                return
            self._rows[entity.id] = copy.copy(entity)

    def delete(self, entity: T) -> None:
        with self._lock:
            if self._rows.pop(entity.id, None) is None:
                logger.warning(f"{type(entity).__name__} {entity.id} not found for deletion")
