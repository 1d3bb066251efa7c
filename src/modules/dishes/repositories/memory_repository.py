"""In-memory implementation of the dish repository."""

from __future__ import annotations

from modules.core.repositories.memory import InMemoryRepository
from modules.dishes.models import Dish
from modules.dishes.repositories.interfaces import IDishRepository


class DishMemoryRepository(InMemoryRepository[Dish], IDishRepository):
    name = "dish"


# Process-wide store shared by every request.
dish_repository = DishMemoryRepository()
