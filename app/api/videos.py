from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Query

from app.api.dependencies import ContentServiceDep
from app.api.schemas import VideoIn, VideoOut

router = APIRouter(prefix="/api/videos", tags=["videos"])


@router.post("", response_model=VideoOut)
def add_video(
    body: VideoIn,
    service: ContentServiceDep,
    module_id: Annotated[int, Query(alias="moduleId")],
) -> VideoOut:
    return VideoOut.from_model(service.add_video(module_id, body.to_model()))
