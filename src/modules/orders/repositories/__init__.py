"""Order repositories package."""

from modules.orders.repositories.interfaces import IOrderRepository
from modules.orders.repositories.memory_repository import (
    OrderMemoryRepository,
    order_repository,
)

__all__ = ["IOrderRepository", "OrderMemoryRepository", "order_repository"]
