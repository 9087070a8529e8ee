from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Query

from app.api.dependencies import ContentServiceDep
from app.api.schemas import QuestionIn, QuestionOut

router = APIRouter(prefix="/api/questions", tags=["questions"])


@router.post("", response_model=QuestionOut)
def add_question(
    body: QuestionIn,
    service: ContentServiceDep,
    assessment_id: Annotated[int, Query(alias="assessmentId")],
) -> QuestionOut:
    return QuestionOut.from_model(
        service.add_question(assessment_id, body.to_model())
    )
