"""Dish validation chains.

Each chain runs before the matching ``DishService`` call; the first
failing check decides the response.
"""

from __future__ import annotations

from modules.core.pipeline import RequestContext, ValidationChain
from modules.core.validators import (
    entity_exists,
    has_data,
    has_route_id,
    id_matches_route,
    is_integer,
)
from modules.dishes.exceptions import DishNotFound, InvalidDishPrice
from modules.dishes.repositories.interfaces import IDishRepository

RESOURCE = "Dish"
ROUTE_PARAM = "dish_id"
ROUTE_LABEL = "dishId"


def has_valid_price(context: RequestContext) -> None:
    price = context.payload.get("price")
    if not is_integer(price) or price <= 0:
        raise InvalidDishPrice()
    context.store("price", int(price))


def _has_dish_fields() -> tuple:
    return (
        has_data(RESOURCE, "name"),
        has_data(RESOURCE, "description"),
        has_data(RESOURCE, "image_url"),
        has_valid_price,
    )


def create_chain() -> ValidationChain:
    return ValidationChain(*_has_dish_fields())


def read_chain(repository: IDishRepository) -> ValidationChain:
    return ValidationChain(
        has_route_id(ROUTE_PARAM, ROUTE_LABEL),
        entity_exists(repository, RESOURCE, DishNotFound),
    )


def update_chain(repository: IDishRepository) -> ValidationChain:
    return ValidationChain(
        has_route_id(ROUTE_PARAM, ROUTE_LABEL),
        entity_exists(repository, RESOURCE, DishNotFound),
        *_has_dish_fields(),
        id_matches_route(RESOURCE),
    )
