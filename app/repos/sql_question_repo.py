"""SQL implementation of QuestionRepo."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.db.tables import QuestionRow
from app.models.course import Question


class SqlQuestionRepo:
    """Satisfies the QuestionRepo Protocol using SQLAlchemy."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_by_assessment(self, assessment_id: int) -> list[Question]:
        stmt = (
            select(QuestionRow)
            .where(QuestionRow.assessment_id == assessment_id)
            .order_by(QuestionRow.id)
        )
        return [_row_to_question(r) for r in self._session.scalars(stmt)]

    def add(self, question: Question) -> Question:
        if question.assessment_id is None:
            raise ValueError("question must reference an assessment")
        row = QuestionRow(
            assessment_id=question.assessment_id,
            text=question.text,
            options=list(question.options),
            correct_answer=question.correct_answer,
        )
        self._session.add(row)
        self._session.flush()
        return _row_to_question(row)


def _row_to_question(row: QuestionRow) -> Question:
    return Question(
        id=row.id,
        assessment_id=row.assessment_id,
        text=row.text,
        options=tuple(row.options) if row.options else (),
        correct_answer=row.correct_answer,
    )
