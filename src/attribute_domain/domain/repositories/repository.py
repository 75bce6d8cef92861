# attribute_domain/domain/repositories/repository.py
"""Generic repository interface."""
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    @abstractmethod
    def table(self) -> list[T]:
        """Retrieves all rows."""
        pass

    @abstractmethod
    def get_by_id(self, entity_id: int) -> T | None:
        """Retrieves a row by its identifier, None if it does not exist."""
        pass

    @abstractmethod
    def insert(self, entity: T) -> None:
        """Persists a new row and assigns its identifier to ``entity.id``."""
        pass

    @abstractmethod
    def update(self, entity: T) -> None:
        """Replaces the stored row with the entity's full state."""
        pass

    @abstractmethod
    def delete(self, entity: T) -> None:
        """Removes the row."""
        pass
