"""Dish domain exceptions.

Raised by the dish validation chain and service.  The error responder
renders them; views never catch them.
"""

from __future__ import annotations

from modules.core.exceptions import NotFoundError, ValidationError


class DishNotFound(NotFoundError):
    """No dish matches the route id."""


class InvalidDishPrice(ValidationError):
    """The price is not an integer greater than zero."""

    default_message = "Dish must have a price that is an integer greater than 0"
