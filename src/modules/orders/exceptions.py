"""Order domain exceptions.

Raised by the order validation chain and service.  The error responder
renders them with their status code.
"""

from __future__ import annotations

from modules.core.exceptions import ConflictError, NotFoundError, ValidationError


class OrderNotFound(NotFoundError):
    """No order matches the route id."""


class InvalidOrderDishes(ValidationError):
    """The dish list is missing, empty, or holds a bad quantity."""


class InvalidOrderStatus(ValidationError):
    """The status is not one of the known values."""


class DeliveredOrderImmutable(ConflictError):
    """A delivered order cannot be changed."""

    default_message = "A delivered order cannot be changed"


class OrderNotPending(ConflictError):
    """Only pending orders may be deleted."""

    default_message = "An order cannot be deleted unless it is pending."
