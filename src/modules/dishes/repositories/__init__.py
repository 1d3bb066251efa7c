"""Dish repositories package."""

from modules.dishes.repositories.interfaces import IDishRepository
from modules.dishes.repositories.memory_repository import (
    DishMemoryRepository,
    dish_repository,
)

__all__ = ["DishMemoryRepository", "IDishRepository", "dish_repository"]
