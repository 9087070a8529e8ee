"""SQL implementation of ModuleRepo."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.db.tables import ModuleRow
from app.models.course import Module


class SqlModuleRepo:
    """Satisfies the ModuleRepo Protocol using SQLAlchemy."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_by_id(self, module_id: int) -> Module | None:
        row = self._session.get(ModuleRow, module_id)
        if row is None:
            return None
        return _row_to_module(row)

    def list_by_course(self, course_id: int) -> list[Module]:
        stmt = (
            select(ModuleRow)
            .where(ModuleRow.course_id == course_id)
            .order_by(ModuleRow.id)
        )
        return [_row_to_module(r) for r in self._session.scalars(stmt)]

    def add(self, module: Module) -> Module:
        if module.course_id is None:
            raise ValueError("module must reference a course")
        row = ModuleRow(
            course_id=module.course_id,
            title=module.title,
            description=module.description,
        )
        self._session.add(row)
        self._session.flush()
        return _row_to_module(row)


def _row_to_module(row: ModuleRow) -> Module:
    return Module(
        id=row.id,
        course_id=row.course_id,
        title=row.title,
        description=row.description or "",
    )
