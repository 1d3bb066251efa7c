"""Validators shared by the dish and order chains.

Each factory returns a callable taking a ``RequestContext``.  Messages
name the resource they guard ("Dish", "Order") so both modules report
errors in the same wording.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from modules.core.exceptions import NotFoundError, ValidationError
from modules.core.pipeline import RequestContext, Validator

if TYPE_CHECKING:
    from modules.core.repositories.interfaces import IRepository

ROUTE_ID = "route_id"
FOUND = "found"

_EMPTY = (None, False, "", 0)


def is_blank(value: Any) -> bool:
    """``None``, ``False``, ``""`` and zero count as a missing field."""
    return value in _EMPTY


def is_integer(value: Any) -> bool:
    """Integers and integral floats; booleans are not numbers here."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and value.is_integer()


def has_data(resource: str, prop: str) -> Validator:
    """Require a non-blank ``prop`` in the payload and store it."""

    def validate(context: RequestContext) -> None:
        value = context.payload.get(prop)
        if is_blank(value):
            raise ValidationError(f"{resource} must include a {prop}")
        context.store(prop, value)

    validate.__name__ = f"has_data_{prop}"
    return validate


def has_route_id(param: str, label: str) -> Validator:
    """Require the route parameter ``param``; ``label`` is its public name."""

    def validate(context: RequestContext) -> None:
        value = context.params.get(param)
        if not value:
            article = "An" if label[:1].lower() in "aeiou" else "A"
            raise ValidationError(f"{article} '{label}' value parameter is required")
        context.store(ROUTE_ID, value)

    return validate


def entity_exists(
    repository: IRepository, resource: str, error: type[NotFoundError] = NotFoundError
) -> Validator:
    """Look the route id up and store the entity under ``FOUND``."""

    def validate(context: RequestContext) -> None:
        route_id = context.get(ROUTE_ID)
        entity = repository.get_by_id(route_id)
        if entity is None:
            raise error(f"{resource} does not exist: {route_id}")
        context.store(FOUND, entity)

    return validate


def id_matches_route(resource: str) -> Validator:
    """Reject a payload ``id`` that disagrees with the route id."""

    def validate(context: RequestContext) -> None:
        route_id = context.get(ROUTE_ID)
        body_id = context.payload.get("id")
        if not is_blank(body_id) and body_id != route_id:
            raise ValidationError(
                f"{resource} id does not match route id. "
                f"{resource}: {body_id}, Route: {route_id}"
            )

    return validate


def passthrough(prop: str) -> Validator:
    """Store ``prop`` from the payload unchecked, when present."""

    def validate(context: RequestContext) -> None:
        if prop in context.payload:
            context.store(prop, context.payload[prop])

    validate.__name__ = f"passthrough_{prop}"
    return validate
