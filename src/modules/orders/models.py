"""Order entities held by the in-memory store.

``Order`` serialises with the camelCase names of the public API
(``deliverTo``, ``mobileNumber``); use ``model_dump(by_alias=True)``.
"""

from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field


class Order(BaseModel):
    """A delivery order.

    Contact fields and ``status`` keep whatever JSON value the client sent.
    Each dish line is the client's object as sent, with ``quantity``
    normalised to an ``int`` by the validation chain.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str
    deliver_to: Any = Field(alias="deliverTo")
    mobile_number: Any = Field(alias="mobileNumber")
    # Not checked against ``OrderStatus`` on creation.
    status: Any = None
    dishes: List[Dict[str, Any]] = Field(default_factory=list)
