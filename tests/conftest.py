from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from app.api import dependencies
from app.main import app
from app.models.course import Assessment, Course, Module, Video
from app.repos.assessment_repo import InMemoryAssessmentRepo
from app.repos.course_repo import InMemoryCourseRepo
from app.repos.module_repo import InMemoryModuleRepo
from app.repos.purchase_repo import InMemoryPurchaseRepo
from app.repos.question_repo import InMemoryQuestionRepo
from app.repos.video_repo import InMemoryVideoRepo
from app.services.content_service import ContentService

# Ensure repo root is on sys.path so `import app` works under pytest.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture(autouse=True)
def reset_repos() -> None:
    """Clear the shared in-memory repos between tests."""
    for repo in (
        dependencies.course_repo,
        dependencies.module_repo,
        dependencies.video_repo,
        dependencies.assessment_repo,
        dependencies.question_repo,
        dependencies.purchase_repo,
    ):
        repo.clear()


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


# ---------------------------------------------------------------------------
# Content helpers
# ---------------------------------------------------------------------------

# (module title, video titles, assessment titles)
ModuleSpec = tuple[str, Sequence[str], Sequence[str]]


def seed_course(
    modules: Sequence[ModuleSpec] = (("A", ("v1", "v2"), ()), ("B", ("v3",), ())),
    *,
    title: str = "Python Basics",
    service: ContentService | None = None,
) -> Course:
    """Create a course with modules, videos and assessments in the given order."""
    service = service or content_service(dependencies.IN_MEMORY_REPOS)
    course = service.create_course(Course.new(title=title))
    for module_title, videos, assessments in modules:
        module = service.add_module(course.id, Module.new(title=module_title))
        for v in videos:
            service.add_video(module.id, Video.new(title=v))
        for a in assessments:
            service.add_assessment(module.id, Assessment.new(title=a))
    return course


def content_service(repos: dependencies.Repos) -> ContentService:
    return ContentService(
        course_repo=repos.courses,
        module_repo=repos.modules,
        video_repo=repos.videos,
        assessment_repo=repos.assessments,
        question_repo=repos.questions,
        purchase_repo=repos.purchases,
    )


def fresh_repos() -> dependencies.Repos:
    """Private in-memory repos, for service tests that skip the HTTP layer."""
    return dependencies.Repos(
        courses=InMemoryCourseRepo(),
        modules=InMemoryModuleRepo(),
        videos=InMemoryVideoRepo(),
        assessments=InMemoryAssessmentRepo(),
        questions=InMemoryQuestionRepo(),
        purchases=InMemoryPurchaseRepo(),
    )
