"""SQL implementation of CourseRepo."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.db.tables import CourseRow
from app.models.course import Course


class SqlCourseRepo:
    """Satisfies the CourseRepo Protocol using SQLAlchemy."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_by_id(self, course_id: int) -> Course | None:
        row = self._session.get(CourseRow, course_id)
        if row is None:
            return None
        return _row_to_course(row)

    def list_all(self) -> list[Course]:
        stmt = select(CourseRow).order_by(CourseRow.id)
        return [_row_to_course(r) for r in self._session.scalars(stmt)]

    def add(self, course: Course) -> Course:
        row = CourseRow(
            title=course.title,
            description=course.description,
            price=course.price,
            thumbnail_url=course.thumbnail_url,
        )
        self._session.add(row)
        self._session.flush()
        return _row_to_course(row)


def _row_to_course(row: CourseRow) -> Course:
    return Course(
        id=row.id,
        title=row.title,
        description=row.description or "",
        price=row.price,
        thumbnail_url=row.thumbnail_url,
    )
