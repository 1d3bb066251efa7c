"""Dish entity held by the in-memory store."""

from __future__ import annotations

from pydantic import BaseModel


class Dish(BaseModel):
    """A menu item.  ``id`` never changes once assigned."""

    id: str
    name: str
    description: str
    image_url: str
    price: int
