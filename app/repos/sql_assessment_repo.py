"""SQL implementation of AssessmentRepo."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.db.tables import AssessmentRow
from app.models.course import Assessment


class SqlAssessmentRepo:
    """Satisfies the AssessmentRepo Protocol using SQLAlchemy."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_by_id(self, assessment_id: int) -> Assessment | None:
        row = self._session.get(AssessmentRow, assessment_id)
        if row is None:
            return None
        return _row_to_assessment(row)

    def list_by_module(self, module_id: int) -> list[Assessment]:
        stmt = (
            select(AssessmentRow)
            .where(AssessmentRow.module_id == module_id)
            .order_by(AssessmentRow.id)
        )
        return [_row_to_assessment(r) for r in self._session.scalars(stmt)]

    def add(self, assessment: Assessment) -> Assessment:
        if assessment.module_id is None:
            raise ValueError("assessment must reference a module")
        row = AssessmentRow(
            module_id=assessment.module_id,
            title=assessment.title,
            description=assessment.description,
        )
        self._session.add(row)
        self._session.flush()
        return _row_to_assessment(row)


def _row_to_assessment(row: AssessmentRow) -> Assessment:
    return Assessment(
        id=row.id,
        module_id=row.module_id,
        title=row.title,
        description=row.description or "",
    )
