"""Service wiring for the API routers.

Without DATABASE_URL, every request shares the module-level in-memory
repositories below.  With a database, each request gets SQL repositories
bound to one session, committed when the response is ready.
"""

from __future__ import annotations

from collections.abc import Generator
from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from app.core.config import SETTINGS
from app.db import engine as db
from app.repos.assessment_repo import AssessmentRepo, InMemoryAssessmentRepo
from app.repos.course_repo import CourseRepo, InMemoryCourseRepo
from app.repos.module_repo import InMemoryModuleRepo, ModuleRepo
from app.repos.purchase_repo import InMemoryPurchaseRepo, PurchaseRepo
from app.repos.question_repo import InMemoryQuestionRepo, QuestionRepo
from app.repos.sql_assessment_repo import SqlAssessmentRepo
from app.repos.sql_course_repo import SqlCourseRepo
from app.repos.sql_module_repo import SqlModuleRepo
from app.repos.sql_purchase_repo import SqlPurchaseRepo
from app.repos.sql_question_repo import SqlQuestionRepo
from app.repos.sql_video_repo import SqlVideoRepo
from app.repos.video_repo import InMemoryVideoRepo, VideoRepo
from app.services.content_service import ContentService
from app.services.purchase_service import PurchaseService


@dataclass(frozen=True)
class Repos:
    courses: CourseRepo
    modules: ModuleRepo
    videos: VideoRepo
    assessments: AssessmentRepo
    questions: QuestionRepo
    purchases: PurchaseRepo


# --- Module-level repo singletons (used when no DATABASE_URL) ---
course_repo = InMemoryCourseRepo()
module_repo = InMemoryModuleRepo()
video_repo = InMemoryVideoRepo()
assessment_repo = InMemoryAssessmentRepo()
question_repo = InMemoryQuestionRepo()
purchase_repo = InMemoryPurchaseRepo()

IN_MEMORY_REPOS = Repos(
    courses=course_repo,
    modules=module_repo,
    videos=video_repo,
    assessments=assessment_repo,
    questions=question_repo,
    purchases=purchase_repo,
)


def sql_repos(session: Session) -> Repos:
    return Repos(
        courses=SqlCourseRepo(session),
        modules=SqlModuleRepo(session),
        videos=SqlVideoRepo(session),
        assessments=SqlAssessmentRepo(session),
        questions=SqlQuestionRepo(session),
        purchases=SqlPurchaseRepo(session),
    )


def get_repos() -> Generator[Repos, None, None]:
    """FastAPI dependency: one repo set per request (cached by FastAPI)."""
    if db.session_factory is None:
        yield IN_MEMORY_REPOS
        return
    with db.session_scope() as session:
        yield sql_repos(session)


def get_content_service(
    repos: Annotated[Repos, Depends(get_repos)],
) -> ContentService:
    return ContentService(
        course_repo=repos.courses,
        module_repo=repos.modules,
        video_repo=repos.videos,
        assessment_repo=repos.assessments,
        question_repo=repos.questions,
        purchase_repo=repos.purchases,
    )


def get_purchase_service(
    repos: Annotated[Repos, Depends(get_repos)],
) -> PurchaseService:
    return PurchaseService(
        repos.purchases,
        default_amount=SETTINGS.default_course_price,
        currency=SETTINGS.currency,
    )


ContentServiceDep = Annotated[ContentService, Depends(get_content_service)]
PurchaseServiceDep = Annotated[PurchaseService, Depends(get_purchase_service)]
