"""SQL implementation of VideoRepo."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.db.tables import VideoRow
from app.models.course import Video


class SqlVideoRepo:
    """Satisfies the VideoRepo Protocol using SQLAlchemy."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_by_module(self, module_id: int) -> list[Video]:
        stmt = (
            select(VideoRow)
            .where(VideoRow.module_id == module_id)
            .order_by(VideoRow.id)
        )
        return [_row_to_video(r) for r in self._session.scalars(stmt)]

    def add(self, video: Video) -> Video:
        if video.module_id is None:
            raise ValueError("video must reference a module")
        row = VideoRow(
            module_id=video.module_id,
            title=video.title,
            video_url=video.video_url,
            duration_seconds=video.duration_seconds,
        )
        self._session.add(row)
        self._session.flush()
        return _row_to_video(row)


def _row_to_video(row: VideoRow) -> Video:
    return Video(
        id=row.id,
        module_id=row.module_id,
        title=row.title,
        video_url=row.video_url or "",
        duration_seconds=row.duration_seconds,
    )
