from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Query

from app.api.dependencies import ContentServiceDep
from app.api.schemas import (
    AssessmentIn,
    AssessmentOut,
    QuestionListResponse,
    QuestionOut,
)

router = APIRouter(prefix="/api/assessments", tags=["assessments"])


@router.post("", response_model=AssessmentOut)
def add_assessment(
    body: AssessmentIn,
    service: ContentServiceDep,
    module_id: Annotated[int, Query(alias="moduleId")],
) -> AssessmentOut:
    return AssessmentOut.from_model(
        service.add_assessment(module_id, body.to_model())
    )


@router.get("/{assessment_id}/questions", response_model=QuestionListResponse)
def list_questions(
    assessment_id: int, service: ContentServiceDep
) -> QuestionListResponse:
    questions = service.list_questions(assessment_id)
    return QuestionListResponse(
        assessment_id=assessment_id,
        questions=[QuestionOut.from_model(q) for q in questions],
        count=len(questions),
    )
