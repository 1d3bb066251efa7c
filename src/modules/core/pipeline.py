"""Request context and validation chain.

A ``ValidationChain`` runs its validators in order against a
``RequestContext``.  A validator either stores what it established in
``context.values`` and returns, or raises an ``ApiError`` which stops the
chain; the view never reaches its handler in that case.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from rest_framework.request import Request

from modules.core.exceptions import ValidationError

Validator = Callable[["RequestContext"], None]
DTO = TypeVar("DTO", bound=BaseModel)


@dataclass
class RequestContext:
    """Per-request accumulator shared by validators and handlers."""

    payload: Dict[str, Any] = field(default_factory=dict)
    params: Dict[str, Any] = field(default_factory=dict)
    values: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_request(cls, request: Request, **params: Any) -> RequestContext:
        """Unwrap the ``{"data": {...}}`` envelope of ``request``."""
        body = request.data if isinstance(request.data, Mapping) else {}
        data = body.get("data")
        return cls(payload=dict(data) if isinstance(data, Mapping) else {}, params=params)

    def store(self, key: str, value: Any) -> None:
        self.values[key] = value

    def get(self, key: str, default: Optional[Any] = None) -> Any:
        return self.values.get(key, default)

    def to_dto(self, dto_class: Type[DTO], resource: str) -> DTO:
        """Build ``dto_class`` from the stored values.

        A value of the wrong shape (a name sent as an object, say) is a
        client error, not a server fault.
        """
        try:
            return dto_class.model_validate(self.values)
        except PydanticValidationError as exc:
            error = exc.errors()[0]
            field_name = ".".join(str(part) for part in error["loc"])
            raise ValidationError(
                f"{resource} {field_name} is invalid: {error['msg']}"
            ) from exc


class ValidationChain:
    """Ordered validators, short-circuiting on the first failure."""

    def __init__(self, *validators: Validator) -> None:
        self._validators: tuple[Validator, ...] = validators

    def run(self, context: RequestContext) -> RequestContext:
        for validator in self._validators:
            validator(context)
        return context
