"""Order id encoding.

No pending-order table exists: a payment-gateway callback carries only
the order id, so the user and course are recovered from the id itself.

    order-<epoch millis>-<user_id>-<course_id>
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

ORDER_PREFIX = "order"
EXISTING_PREFIX = "existing"

# Segments must fit a signed 64-bit integer, the width of stored ids.
MAX_ID = 2**63 - 1


@dataclass(frozen=True, slots=True)
class DecodedOrder:
    created_at_ms: int
    user_id: int
    course_id: int


def encode_order_id(created_at_ms: int, user_id: int, course_id: int) -> str:
    return f"{ORDER_PREFIX}-{created_at_ms}-{user_id}-{course_id}"


def existing_order_id(user_id: int, course_id: int) -> str:
    """Synthetic id reported when the course is already purchased."""
    return f"{EXISTING_PREFIX}-{user_id}-{course_id}"


def _parse_int(segment: str) -> int | None:
    if not (segment.isascii() and segment.isdigit()) or len(segment) > 19:
        return None
    value = int(segment)
    return value if value <= MAX_ID else None


def decode_order_id(order_id: str | None) -> DecodedOrder | None:
    """Recover (user_id, course_id) from an order id, or None if malformed.

    Never raises.  Segments past the fourth are ignored.
    """
    if not order_id or "-" not in order_id:
        return None

    parts = order_id.split("-")
    if len(parts) < 4:
        logger.debug("Order id has too few segments: %r", order_id)
        return None

    created_at_ms = _parse_int(parts[1])
    user_id = _parse_int(parts[2])
    course_id = _parse_int(parts[3])
    if created_at_ms is None or user_id is None or course_id is None:
        logger.debug("Order id has non-numeric segments: %r", order_id)
        return None

    return DecodedOrder(
        created_at_ms=created_at_ms, user_id=user_id, course_id=course_id
    )
