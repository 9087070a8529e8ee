"""Course endpoints.

Course reads carry per-user lock state:
  GET /api/courses?userId=7
  -> load every course with its modules, videos and assessments
  -> derive subscribed/locked for user 7 (absent userId: anonymous)
  -> 200 {data, success, message, count}
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Query

from app.api.dependencies import ContentServiceDep
from app.api.schemas import (
    CourseDetailOut,
    CourseIn,
    CourseListResponse,
    CourseOut,
    CourseResponse,
)
from app.core.errors import NotFoundError

router = APIRouter(prefix="/api/courses", tags=["courses"])

UserIdQuery = Annotated[int | None, Query(alias="userId")]


@router.post("", response_model=CourseOut)
def create_course(body: CourseIn, service: ContentServiceDep) -> CourseOut:
    return CourseOut.from_model(service.create_course(body.to_model()))


@router.get("", response_model=CourseListResponse)
def list_courses(
    service: ContentServiceDep, user_id: UserIdQuery = None
) -> CourseListResponse:
    views = service.list_courses(user_id)
    return CourseListResponse(
        data=[CourseDetailOut.from_view(v) for v in views],
        count=len(views),
    )


@router.get("/{course_id}", response_model=CourseResponse)
def get_course(
    course_id: int, service: ContentServiceDep, user_id: UserIdQuery = None
) -> CourseResponse:
    view = service.get_course(course_id, user_id)
    if view is None:
        raise NotFoundError("course", course_id)
    return CourseResponse(data=CourseDetailOut.from_view(view))
