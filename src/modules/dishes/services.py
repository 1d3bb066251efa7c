"""Dish service layer (Use Cases).

Performs the collection mutation once the validation chain has passed,
delegating storage to the injected ``IDishRepository``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog

from modules.dishes.models import Dish

if TYPE_CHECKING:
    from modules.dishes.dtos import DishDTO
    from modules.dishes.repositories.interfaces import IDishRepository

logger = structlog.get_logger(__name__)


class DishService:
    """Application service for dish use-cases.

    Receives an ``IDishRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IDishRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_dish(self, dto: DishDTO) -> Dish:
        """Assign a fresh id and append the dish to the store."""
        dish = Dish(id=self._repo.next_id(), **dto.model_dump())
        self._repo.save(dish)
        logger.info("dish.created", dish_id=dish.id, name=dish.name)
        return dish

    def update_dish(self, dish: Dish, dto: DishDTO) -> Dish:
        """Replace ``dish`` in the store with an overwritten copy; ``id`` is kept.

        The stored instance is never mutated, so a reader holding it sees
        either the old dish or the new one.
        """
        updated = dish.model_copy(update=dto.model_dump())
        self._repo.save(updated)
        logger.info("dish.updated", dish_id=updated.id)
        return updated

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_dishes(self) -> List[Dish]:
        return self._repo.list()
