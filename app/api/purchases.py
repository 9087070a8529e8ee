"""Purchase and payment endpoints.

Frontend payment sequence:
  POST /api/course/purchase?userId=7&courseId=1      -> order id (nothing stored)
  ... client pays through the gateway ...
  POST /api/payments/verify {orderId, paymentId, signature}
  -> verify (stub) -> decode user/course from orderId -> record purchase
  GET  /api/course/purchased?userId=7&courseId=1     -> {purchased: true}

Failures inside the purchase flow come back as 400
``{success: false, message, error}``.  A rejected verification is not a
failure: it is a 200 with ``verified: false``.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse

from app.api.dependencies import PurchaseServiceDep
from app.api.schemas import (
    FailureResponse,
    OrderResponse,
    PaymentVerifyIn,
    PurchaseCompleteResponse,
    PurchaseStatusResponse,
    VerificationResponse,
)
from app.services.purchase_service import (
    PaymentFailure,
    PurchaseReceipt,
    VerificationResult,
)

router = APIRouter(prefix="/api", tags=["purchases"])

UserIdQuery = Annotated[int, Query(alias="userId")]
CourseIdQuery = Annotated[int, Query(alias="courseId")]

_FAILURE_RESPONSES: dict[int | str, dict] = {400: {"model": FailureResponse}}


def _failure(failure: PaymentFailure) -> JSONResponse:
    body = FailureResponse.from_failure(failure)
    return JSONResponse(status_code=400, content=body.model_dump(by_alias=True))


@router.post(
    "/course/purchase",
    response_model=OrderResponse,
    response_model_exclude_none=True,
    responses=_FAILURE_RESPONSES,
)
def create_purchase_order(
    service: PurchaseServiceDep,
    user_id: UserIdQuery,
    course_id: CourseIdQuery,
    amount: Annotated[float | None, Query(ge=0)] = None,
) -> OrderResponse | JSONResponse:
    result = service.create_order(user_id, course_id, amount)
    if isinstance(result, PaymentFailure):
        return _failure(result)
    return OrderResponse(
        message=result.message,
        order_id=result.order_id,
        already_purchased=result.already_purchased,
        user_id=result.user_id,
        course_id=result.course_id,
        amount=result.amount,
        currency=result.currency,
    )


@router.post(
    "/payments/verify",
    response_model=VerificationResponse,
    response_model_exclude_none=True,
    responses=_FAILURE_RESPONSES,
)
def verify_payment(
    body: PaymentVerifyIn, service: PurchaseServiceDep
) -> VerificationResponse | JSONResponse:
    result = service.verify_and_complete(body.order_id, body.payment_id, body.signature)
    if isinstance(result, PaymentFailure):
        return _failure(result)
    if isinstance(result, VerificationResult):
        return VerificationResponse(
            success=result.verified,
            message=result.message,
            verified=result.verified,
            order_id=result.order_id,
            payment_id=result.payment_id,
        )
    receipt: PurchaseReceipt = result
    return VerificationResponse(
        success=True,
        message=receipt.message,
        verified=True,
        order_id=receipt.order_id,
        payment_id=receipt.payment_id,
        course_unlocked=True,
        user_id=receipt.user_id,
        course_id=receipt.course_id,
    )


@router.get(
    "/course/purchased",
    response_model=PurchaseStatusResponse,
    response_model_exclude_none=True,
    responses=_FAILURE_RESPONSES,
)
def get_purchase_status(
    service: PurchaseServiceDep,
    user_id: UserIdQuery,
    course_id: CourseIdQuery,
) -> PurchaseStatusResponse | JSONResponse:
    result = service.get_purchase_status(user_id, course_id)
    if isinstance(result, PaymentFailure):
        return _failure(result)
    return PurchaseStatusResponse(
        message=result.message,
        user_id=result.user_id,
        course_id=result.course_id,
        purchased=result.purchased,
        purchase_date=result.purchase_date,
    )


@router.post(
    "/course/purchase/complete",
    response_model=PurchaseCompleteResponse,
    responses=_FAILURE_RESPONSES,
)
def complete_purchase(
    service: PurchaseServiceDep,
    user_id: UserIdQuery,
    course_id: CourseIdQuery,
    order_id: Annotated[str, Query(alias="orderId")],
    payment_id: Annotated[str, Query(alias="paymentId")],
) -> PurchaseCompleteResponse | JSONResponse:
    """Record a purchase directly, without going through verification."""
    result = service.complete_purchase(user_id, course_id, order_id, payment_id)
    if isinstance(result, PaymentFailure):
        return _failure(result)
    return PurchaseCompleteResponse(
        message=result.message,
        order_id=result.order_id,
        payment_id=result.payment_id,
        user_id=result.user_id,
        course_id=result.course_id,
    )
