"""Order domain constants.

Defines the status values an order may carry.  The only transition rules
are that a delivered order is frozen and only a pending order may be
deleted.
"""

from __future__ import annotations

from enum import Enum


class OrderStatus(str, Enum):
    PENDING = "pending"
    PREPARING = "preparing"
    OUT_FOR_DELIVERY = "out-for-delivery"
    DELIVERED = "delivered"


VALID_STATUSES: tuple[str, ...] = tuple(s.value for s in OrderStatus)

# A stored status may be any JSON value, unhashable ones included.

# No field of an order in one of these states may change.
TERMINAL_STATES: tuple[str, ...] = (OrderStatus.DELIVERED.value,)

DELETABLE_STATES: tuple[str, ...] = (OrderStatus.PENDING.value,)
