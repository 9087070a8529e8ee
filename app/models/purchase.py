from __future__ import annotations

import datetime
from dataclasses import dataclass

PURCHASE_STATUS_COMPLETED = "COMPLETED"


@dataclass(frozen=True, slots=True)
class Purchase:
    """A user's completed purchase of a course.

    Existence of a row for (user_id, course_id) is what grants access;
    there is no expiry or revocation.
    """

    id: int | None
    user_id: int
    course_id: int
    purchase_date: datetime.datetime
    order_id: str | None
    payment_id: str | None
    status: str = PURCHASE_STATUS_COMPLETED

    @staticmethod
    def completed(
        *,
        user_id: int,
        course_id: int,
        order_id: str | None,
        payment_id: str | None,
        purchase_date: datetime.datetime,
    ) -> Purchase:
        return Purchase(
            id=None,
            user_id=user_id,
            course_id=course_id,
            purchase_date=purchase_date,
            order_id=order_id,
            payment_id=payment_id,
        )
