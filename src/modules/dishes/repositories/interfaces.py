"""Dish repository interface."""

from __future__ import annotations

from typing import TYPE_CHECKING

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.dishes.models import Dish


class IDishRepository(IRepository["Dish"]):
    """Repository contract for dishes.  Dishes are never deleted through the API."""
