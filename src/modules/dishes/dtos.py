"""Dish DTOs for the Service Layer.

Built from the values the validation chain stored in the request
context.  DTOs are immutable (``frozen=True``) and ignore any context
value that is not a dish field.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class DishDTO(BaseModel):
    """Input for dish creation and full updates."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str
    description: str
    image_url: str
    price: int
