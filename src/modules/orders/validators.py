"""Order validation chains.

Creation deliberately skips ``has_valid_status``: clients may create an
order with any status value, and only updates are held to
``VALID_STATUSES``.
"""

from __future__ import annotations

from collections.abc import Mapping

from modules.core.pipeline import RequestContext, ValidationChain
from modules.core.validators import (
    FOUND,
    entity_exists,
    has_data,
    has_route_id,
    id_matches_route,
    is_blank,
    is_integer,
    passthrough,
)
from modules.orders.constants import TERMINAL_STATES, VALID_STATUSES
from modules.orders.exceptions import (
    DeliveredOrderImmutable,
    InvalidOrderDishes,
    InvalidOrderStatus,
    OrderNotFound,
)
from modules.orders.repositories.interfaces import IOrderRepository

RESOURCE = "Order"
ROUTE_PARAM = "order_id"
ROUTE_LABEL = "orderId"


def has_valid_dishes(context: RequestContext) -> None:
    dishes = context.payload.get("dishes")
    if is_blank(dishes):
        raise InvalidOrderDishes("Order must include a dish")
    if not isinstance(dishes, list) or not dishes:
        raise InvalidOrderDishes("Order must include at least one dish")

    for index, dish in enumerate(dishes):
        quantity = dish.get("quantity") if isinstance(dish, Mapping) else None
        if is_blank(quantity) or not is_integer(quantity) or quantity < 1:
            raise InvalidOrderDishes(
                f"Dish {index} must have a quantity that is an integer greater than 0"
            )

    context.store(
        "dishes", [{**dish, "quantity": int(dish["quantity"])} for dish in dishes]
    )


def has_valid_status(context: RequestContext) -> None:
    status = context.get("status")
    if status not in VALID_STATUSES:
        raise InvalidOrderStatus(
            f"Order must have a status of {', '.join(VALID_STATUSES)}; got: {status}"
        )
    if context.get(FOUND).status in TERMINAL_STATES:
        raise DeliveredOrderImmutable()


def _has_order_id(repository: IOrderRepository) -> tuple:
    return (
        has_route_id(ROUTE_PARAM, ROUTE_LABEL),
        entity_exists(repository, RESOURCE, OrderNotFound),
    )


def create_chain() -> ValidationChain:
    return ValidationChain(
        has_data(RESOURCE, "deliverTo"),
        has_data(RESOURCE, "mobileNumber"),
        has_valid_dishes,
        passthrough("status"),
    )


def read_chain(repository: IOrderRepository) -> ValidationChain:
    return ValidationChain(*_has_order_id(repository))


delete_chain = read_chain


def update_chain(repository: IOrderRepository) -> ValidationChain:
    return ValidationChain(
        *_has_order_id(repository),
        id_matches_route(RESOURCE),
        has_data(RESOURCE, "deliverTo"),
        has_data(RESOURCE, "mobileNumber"),
        has_data(RESOURCE, "status"),
        has_valid_dishes,
        has_valid_status,
    )
