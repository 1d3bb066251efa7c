"""In-memory implementation of the order repository."""

from __future__ import annotations

from modules.core.repositories.memory import InMemoryRepository
from modules.orders.models import Order
from modules.orders.repositories.interfaces import IOrderRepository


class OrderMemoryRepository(InMemoryRepository[Order], IOrderRepository):
    name = "order"


# Process-wide store shared by every request.
order_repository = OrderMemoryRepository()
