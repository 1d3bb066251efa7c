"""Order service layer (Use Cases).

Mutates the order store once the validation chain has passed.  The
delete rule lives here rather than in the chain: it depends on the
stored order, which only the handler acts on.

Business rules enforced:
- A delivered order cannot be changed (checked by the update chain).
- Only a pending order can be deleted.
- ``dishes`` is fixed at creation; updates leave it untouched.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog

from modules.orders.constants import DELETABLE_STATES
from modules.orders.exceptions import OrderNotFound, OrderNotPending
from modules.orders.models import Order

if TYPE_CHECKING:
    from modules.orders.dtos import OrderDTO
    from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)

UPDATABLE_FIELDS = ("deliver_to", "mobile_number", "status")


class OrderService:
    """Application service for Order use-cases.

    Receives an ``IOrderRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IOrderRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_order(self, dto: OrderDTO) -> Order:
        """Assign a fresh id and append the order to the store.

        The status is stored as supplied, even when it is not one of
        ``VALID_STATUSES``.
        """
        order = Order(
            id=self._repo.next_id(),
            deliver_to=dto.deliver_to,
            mobile_number=dto.mobile_number,
            status=dto.status,
            dishes=[dict(line) for line in dto.dishes],
        )
        self._repo.save(order)
        logger.info(
            "order.created",
            order_id=order.id,
            status=order.status,
            dish_count=len(order.dishes),
        )
        return order

    def update_order(self, order: Order, dto: OrderDTO) -> Order:
        """Store a copy of ``order`` with new ``deliverTo``, ``mobileNumber`` and ``status``.

        The copy replaces the stored order in one step; the original
        instance is left untouched.
        """
        updated = order.model_copy(
            update={field: getattr(dto, field) for field in UPDATABLE_FIELDS}
        )
        self._repo.save(updated)
        logger.info(
            "order.updated",
            order_id=updated.id,
            old_status=order.status,
            new_status=updated.status,
        )
        return updated

    def delete_order(self, order: Order) -> None:
        """Remove a pending order.

        Raises:
            OrderNotPending: the order has moved past ``pending``.
            OrderNotFound: the order vanished from the store.
        """
        if order.status not in DELETABLE_STATES:
            logger.info("order.delete_refused", order_id=order.id, status=order.status)
            raise OrderNotPending()
        if not self._repo.delete(order.id):
            raise OrderNotFound(f"Order does not exist: {order.id}")
        logger.info("order.deleted", order_id=order.id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_orders(self) -> List[Order]:
        return self._repo.list()
