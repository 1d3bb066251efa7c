"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that the dish and
order repository interfaces extend.  Validators and services depend on
this abstraction, never on the concrete store.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ContextManager, Generic, List, Optional, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the entity managed by the repository
    (``Dish`` or ``Order``).  Entities expose a string ``id``.
    """

    @abstractmethod
    def get_by_id(self, id: str) -> Optional[T]:
        """Retrieve an entity by id, ``None`` if absent."""

    @abstractmethod
    def list(self) -> List[T]:
        """All entities in insertion order."""

    @abstractmethod
    def next_id(self) -> str:
        """A fresh id not used by any stored entity."""

    @abstractmethod
    def save(self, entity: T) -> T:
        """Append a new entity or replace the stored one with the same id."""

    @abstractmethod
    def delete(self, id: str) -> bool:
        """Remove an entity by id, keeping the order of the others.

        Returns ``False`` when nothing was removed.
        """

    @abstractmethod
    def atomic(self) -> ContextManager[None]:
        """Serialise a read-validate-write sequence against other requests."""
