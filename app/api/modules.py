"""Module endpoints.

Module reads eager-load videos and assessments but carry no user, so
every ``locked`` flag here is false; per-user lock state is only
derived on course reads.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Query

from app.api.dependencies import ContentServiceDep
from app.api.schemas import (
    AssessmentListResponse,
    AssessmentOut,
    ModuleIn,
    ModuleListResponse,
    ModuleOut,
    ModuleResponse,
    VideoListResponse,
    VideoOut,
)
from app.core.errors import NotFoundError

router = APIRouter(prefix="/api/modules", tags=["modules"])


@router.post("", response_model=ModuleOut)
def add_module(
    body: ModuleIn,
    service: ContentServiceDep,
    course_id: Annotated[int, Query(alias="courseId")],
) -> ModuleOut:
    return ModuleOut.from_model(service.add_module(course_id, body.to_model()))


@router.get("/course/{course_id}", response_model=ModuleListResponse)
def list_modules(course_id: int, service: ContentServiceDep) -> ModuleListResponse:
    trees = service.list_modules(course_id)
    return ModuleListResponse(
        data=[ModuleOut.from_tree(t) for t in trees], count=len(trees)
    )


@router.get("/{module_id}", response_model=ModuleResponse)
def get_module(module_id: int, service: ContentServiceDep) -> ModuleResponse:
    tree = service.get_module(module_id)
    if tree is None:
        raise NotFoundError("module", module_id)
    return ModuleResponse(data=ModuleOut.from_tree(tree))


@router.get("/{module_id}/videos", response_model=VideoListResponse)
def list_videos(module_id: int, service: ContentServiceDep) -> VideoListResponse:
    videos = service.list_videos(module_id)
    return VideoListResponse(
        data=[VideoOut.from_model(v) for v in videos], count=len(videos)
    )


@router.get("/{module_id}/assessments", response_model=AssessmentListResponse)
def list_assessments(
    module_id: int, service: ContentServiceDep
) -> AssessmentListResponse:
    assessments = service.list_assessments(module_id)
    return AssessmentListResponse(
        data=[AssessmentOut.from_model(a) for a in assessments],
        count=len(assessments),
    )
