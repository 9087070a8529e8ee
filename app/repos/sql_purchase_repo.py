"""SQL implementation of PurchaseRepo."""

from __future__ import annotations

from sqlalchemy import exists, select
from sqlalchemy.orm import Session

from app.db.tables import PurchaseRow
from app.models.purchase import Purchase


class SqlPurchaseRepo:
    """Satisfies the PurchaseRepo Protocol using SQLAlchemy."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def exists(self, user_id: int, course_id: int) -> bool:
        stmt = select(
            exists().where(
                PurchaseRow.user_id == user_id,
                PurchaseRow.course_id == course_id,
            )
        )
        return bool(self._session.scalar(stmt))

    def get(self, user_id: int, course_id: int) -> Purchase | None:
        stmt = (
            select(PurchaseRow)
            .where(
                PurchaseRow.user_id == user_id,
                PurchaseRow.course_id == course_id,
            )
            .order_by(PurchaseRow.id)
            .limit(1)
        )
        row = self._session.scalars(stmt).first()
        if row is None:
            return None
        return _row_to_purchase(row)

    def add(self, purchase: Purchase) -> Purchase:
        row = PurchaseRow(
            user_id=purchase.user_id,
            course_id=purchase.course_id,
            purchase_date=purchase.purchase_date,
            order_id=purchase.order_id,
            payment_id=purchase.payment_id,
            status=purchase.status,
        )
        self._session.add(row)
        self._session.flush()
        return _row_to_purchase(row)


def _row_to_purchase(row: PurchaseRow) -> Purchase:
    return Purchase(
        id=row.id,
        user_id=row.user_id,
        course_id=row.course_id,
        purchase_date=row.purchase_date,
        order_id=row.order_id,
        payment_id=row.payment_id,
        status=row.status,
    )
