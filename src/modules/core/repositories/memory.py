"""In-process implementation of ``IRepository``.

Entities live in a plain list; lookups are linear scans on ``id``.
A re-entrant lock guards every read and write, and ``atomic()`` lets a
view hold it across its whole validation chain and handler.
"""

from __future__ import annotations

import itertools
import threading
from contextlib import contextmanager
from typing import Iterable, Iterator, List, Optional, TypeVar

import structlog

from modules.core.repositories.interfaces import IRepository

logger = structlog.get_logger(__name__)

T = TypeVar("T")


class InMemoryRepository(IRepository[T]):
    """List-backed store shared by every request of the process."""

    name = "entity"

    def __init__(self, entities: Optional[Iterable[T]] = None) -> None:
        self._lock = threading.RLock()
        self._entities: List[T] = list(entities or [])
        self._counter = itertools.count(1)

    @contextmanager
    def atomic(self) -> Iterator[None]:
        with self._lock:
            yield

    def _index_of(self, id: str) -> int:
        for index, entity in enumerate(self._entities):
            if entity.id == id:
                return index
        return -1

    def get_by_id(self, id: str) -> Optional[T]:
        with self._lock:
            index = self._index_of(id)
            return self._entities[index] if index > -1 else None

    def list(self) -> List[T]:
        with self._lock:
            return list(self._entities)

    def count(self) -> int:
        with self._lock:
            return len(self._entities)

    def next_id(self) -> str:
        with self._lock:
            while True:
                candidate = str(next(self._counter))
                if self._index_of(candidate) == -1:
                    return candidate

    def save(self, entity: T) -> T:
        with self._lock:
            index = self._index_of(entity.id)
            if index > -1:
                self._entities[index] = entity
            else:
                self._entities.append(entity)
        logger.debug(f"{self.name}.saved", entity_id=entity.id)
        return entity

    def delete(self, id: str) -> bool:
        with self._lock:
            index = self._index_of(id)
            if index == -1:
                return False
            del self._entities[index]
        logger.debug(f"{self.name}.removed", entity_id=id)
        return True

    def clear(self) -> None:
        """Drop every entity and restart id assignment."""
        with self._lock:
            self._entities.clear()
            self._counter = itertools.count(1)
