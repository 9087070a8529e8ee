"""Purchase and payment flow.

Per (user, course) the lifecycle is

    NoOrder -> OrderCreated -> PaymentVerified -> PurchaseCompleted

Only PurchaseCompleted is persisted.  An order exists solely as its
encoded id (see app/services/order_ids.py), and payment verification is
a stub that accepts any request carrying both an order id and a payment
id; the signature is not checked.

Every public method returns a result object instead of raising, so the
API can answer with a uniform ``{success, message, error}`` body.
"""

from __future__ import annotations

import datetime
import logging
from collections.abc import Callable
from dataclasses import dataclass

from app.core.metrics import (
    PAYMENT_VERIFICATIONS,
    PURCHASE_ORDERS,
    PURCHASES_COMPLETED,
)
from app.models.purchase import Purchase
from app.repos.purchase_repo import PurchaseRepo
from app.services.order_ids import decode_order_id, encode_order_id, existing_order_id

logger = logging.getLogger(__name__)

DEFAULT_COURSE_PRICE = 399.0
DEFAULT_CURRENCY = "INR"


def _utcnow() -> datetime.datetime:
    return datetime.datetime.now(datetime.UTC)


def has_purchased(
    purchase_repo: PurchaseRepo, user_id: int | None, course_id: int | None
) -> bool:
    """True if a purchase exists.  Absent or non-positive ids never hit storage."""
    if user_id is None or user_id <= 0 or course_id is None or course_id <= 0:
        return False
    return purchase_repo.exists(user_id, course_id)


# --- Results ---


@dataclass(frozen=True, slots=True)
class PaymentFailure:
    message: str
    error: str


@dataclass(frozen=True, slots=True)
class OrderInfo:
    order_id: str
    user_id: int
    course_id: int
    already_purchased: bool
    message: str
    amount: float | None = None
    currency: str | None = None


@dataclass(frozen=True, slots=True)
class VerificationResult:
    verified: bool
    message: str
    order_id: str | None = None
    payment_id: str | None = None


@dataclass(frozen=True, slots=True)
class PurchaseReceipt:
    user_id: int
    course_id: int
    order_id: str | None
    payment_id: str | None
    newly_recorded: bool
    message: str


@dataclass(frozen=True, slots=True)
class PurchaseStatus:
    user_id: int
    course_id: int
    purchased: bool
    message: str
    purchase_date: datetime.datetime | None = None


# --- Service ---


class PurchaseService:
    def __init__(
        self,
        purchase_repo: PurchaseRepo,
        *,
        default_amount: float = DEFAULT_COURSE_PRICE,
        currency: str = DEFAULT_CURRENCY,
        clock: Callable[[], datetime.datetime] = _utcnow,
    ) -> None:
        self._purchases = purchase_repo
        self._default_amount = default_amount
        self._currency = currency
        self._clock = clock

    def has_purchased(self, user_id: int | None, course_id: int | None) -> bool:
        return has_purchased(self._purchases, user_id, course_id)

    def create_order(
        self, user_id: int, course_id: int, amount: float | None = None
    ) -> OrderInfo | PaymentFailure:
        """Issue an order id for the payment gateway.  Nothing is stored."""
        try:
            if self.has_purchased(user_id, course_id):
                PURCHASE_ORDERS.labels(result="already_purchased").inc()
                logger.info(
                    "Order skipped, already purchased user=%d course=%d",
                    user_id,
                    course_id,
                )
                return OrderInfo(
                    order_id=existing_order_id(user_id, course_id),
                    user_id=user_id,
                    course_id=course_id,
                    already_purchased=True,
                    message="Course already purchased",
                )

            created_at_ms = int(self._clock().timestamp() * 1000)
            order_id = encode_order_id(created_at_ms, user_id, course_id)
        except Exception as e:
            PURCHASE_ORDERS.labels(result="failed").inc()
            logger.exception(
                "Order creation failed user=%s course=%s", user_id, course_id
            )
            return PaymentFailure(
                message=f"Failed to create purchase order: {e}", error=str(e)
            )

        PURCHASE_ORDERS.labels(result="created").inc()
        logger.info(
            "Order created order_id=%s user=%d course=%d",
            order_id,
            user_id,
            course_id,
            extra={"order_id": order_id, "user_id": user_id, "course_id": course_id},
        )
        return OrderInfo(
            order_id=order_id,
            user_id=user_id,
            course_id=course_id,
            already_purchased=False,
            message="Purchase order created successfully",
            amount=amount if amount is not None else self._default_amount,
            currency=self._currency,
        )

    def verify_payment(
        self,
        order_id: str | None,
        payment_id: str | None,
        signature: str | None,
    ) -> VerificationResult:
        # TODO: check `signature` as an HMAC-SHA256 of "order_id|payment_id"
        # under the gateway secret once a gateway account is configured.
        if order_id is None or payment_id is None:
            PAYMENT_VERIFICATIONS.labels(result="rejected").inc()
            logger.warning(
                "Payment verification rejected order_id=%r payment_id=%r",
                order_id,
                payment_id,
            )
            return VerificationResult(
                verified=False,
                message="Payment verification failed - invalid parameters",
            )

        PAYMENT_VERIFICATIONS.labels(result="verified").inc()
        logger.info("Payment verified order_id=%s payment_id=%s", order_id, payment_id)
        return VerificationResult(
            verified=True,
            message="Payment verified successfully",
            order_id=order_id,
            payment_id=payment_id,
        )

    def complete_purchase(
        self,
        user_id: int,
        course_id: int,
        order_id: str | None,
        payment_id: str | None,
    ) -> PurchaseReceipt | PaymentFailure:
        """Record the purchase unless one already exists for the pair.

        Check-then-insert is not atomic; a concurrent duplicate may insert a
        second row, which is harmless since access depends on existence.
        """
        try:
            newly_recorded = not self._purchases.exists(user_id, course_id)
            if newly_recorded:
                self._purchases.add(
                    Purchase.completed(
                        user_id=user_id,
                        course_id=course_id,
                        order_id=order_id,
                        payment_id=payment_id,
                        purchase_date=self._clock(),
                    )
                )
        except Exception as e:
            PURCHASES_COMPLETED.labels(result="failed").inc()
            logger.exception(
                "Purchase write failed user=%d course=%d", user_id, course_id
            )
            return PaymentFailure(
                message=f"Failed to complete purchase: {e}", error=str(e)
            )

        PURCHASES_COMPLETED.labels(
            result="recorded" if newly_recorded else "already_recorded"
        ).inc()
        logger.info(
            "Purchase %s user=%d course=%d order_id=%s",
            "recorded" if newly_recorded else "already on file",
            user_id,
            course_id,
            order_id,
            extra={"order_id": order_id, "user_id": user_id, "course_id": course_id},
        )
        return PurchaseReceipt(
            user_id=user_id,
            course_id=course_id,
            order_id=order_id,
            payment_id=payment_id,
            newly_recorded=newly_recorded,
            message="Course purchased successfully",
        )

    def verify_and_complete(
        self,
        order_id: str | None,
        payment_id: str | None,
        signature: str | None,
    ) -> VerificationResult | PurchaseReceipt | PaymentFailure:
        """Gateway callback: verify, then unlock the course the order encodes.

        Returns the bare VerificationResult when verification fails or the
        order id does not decode to a (user, course) pair.
        """
        verification = self.verify_payment(order_id, payment_id, signature)
        if not verification.verified:
            return verification

        decoded = decode_order_id(order_id)
        if decoded is None:
            logger.warning("Verified order id is not decodable: %r", order_id)
            return verification

        result = self.complete_purchase(
            decoded.user_id, decoded.course_id, order_id, payment_id
        )
        if isinstance(result, PaymentFailure):
            return result
        return PurchaseReceipt(
            user_id=result.user_id,
            course_id=result.course_id,
            order_id=result.order_id,
            payment_id=result.payment_id,
            newly_recorded=result.newly_recorded,
            message="Payment verified and course unlocked successfully",
        )

    def get_purchase_status(
        self, user_id: int, course_id: int
    ) -> PurchaseStatus | PaymentFailure:
        try:
            purchase = (
                self._purchases.get(user_id, course_id)
                if self.has_purchased(user_id, course_id)
                else None
            )
        except Exception as e:
            logger.exception(
                "Purchase status lookup failed user=%d course=%d", user_id, course_id
            )
            return PaymentFailure(
                message=f"Failed to check purchase status: {e}", error=str(e)
            )

        purchased = purchase is not None
        return PurchaseStatus(
            user_id=user_id,
            course_id=course_id,
            purchased=purchased,
            message="Course is purchased" if purchased else "Course not purchased",
            purchase_date=purchase.purchase_date if purchase else None,
        )
