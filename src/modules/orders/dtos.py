"""Order DTOs for the Service Layer.

Built from the values the validation chain stored in the request
context, so field names follow the public camelCase keys.  DTOs are
immutable (``frozen=True``).
"""

from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field


class OrderDTO(BaseModel):
    """Input for order creation and updates.

    On update ``dishes`` is validated but the service does not apply it.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    deliver_to: Any = Field(alias="deliverTo")
    mobile_number: Any = Field(alias="mobileNumber")
    status: Any = None
    dishes: List[Dict[str, Any]] = Field(default_factory=list)
