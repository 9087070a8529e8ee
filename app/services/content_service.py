"""Course content reads and writes.

Add-operations resolve the parent id first and raise InvalidReferenceError
when it does not exist; the API turns that into a 400.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from app.core.errors import InvalidReferenceError
from app.models.content_view import CourseView, ModuleTree
from app.models.course import Assessment, Course, Module, Question, Video
from app.repos.assessment_repo import AssessmentRepo
from app.repos.course_repo import CourseRepo
from app.repos.module_repo import ModuleRepo
from app.repos.purchase_repo import PurchaseRepo
from app.repos.question_repo import QuestionRepo
from app.repos.video_repo import VideoRepo
from app.services.lock_evaluator import LockEvaluator

logger = logging.getLogger(__name__)


class ContentService:
    def __init__(
        self,
        course_repo: CourseRepo,
        module_repo: ModuleRepo,
        video_repo: VideoRepo,
        assessment_repo: AssessmentRepo,
        question_repo: QuestionRepo,
        purchase_repo: PurchaseRepo,
    ) -> None:
        self._courses = course_repo
        self._modules = module_repo
        self._videos = video_repo
        self._assessments = assessment_repo
        self._questions = question_repo
        self._locks = LockEvaluator(
            module_repo, video_repo, assessment_repo, purchase_repo
        )

    # --- Courses ---

    def create_course(self, course: Course) -> Course:
        stored = self._courses.add(course)
        logger.info("Created course id=%s title=%r", stored.id, stored.title)
        return stored

    def list_courses(self, user_id: int | None) -> list[CourseView]:
        return [self._locks.evaluate(c, user_id) for c in self._courses.list_all()]

    def get_course(self, course_id: int, user_id: int | None) -> CourseView | None:
        course = self._courses.get_by_id(course_id)
        if course is None:
            return None
        return self._locks.evaluate(course, user_id)

    # --- Modules ---

    def add_module(self, course_id: int, module: Module) -> Module:
        if self._courses.get_by_id(course_id) is None:
            logger.warning("Rejected module for unknown course=%d", course_id)
            raise InvalidReferenceError("course", course_id)
        stored = self._modules.add(replace(module, course_id=course_id))
        logger.info("Created module id=%s course=%d", stored.id, course_id)
        return stored

    def list_modules(self, course_id: int) -> list[ModuleTree]:
        return self._locks.load_modules(course_id)

    def get_module(self, module_id: int) -> ModuleTree | None:
        module = self._modules.get_by_id(module_id)
        if module is None:
            return None
        return self._locks.load_tree(module)

    # --- Videos ---

    def add_video(self, module_id: int, video: Video) -> Video:
        if self._modules.get_by_id(module_id) is None:
            logger.warning("Rejected video for unknown module=%d", module_id)
            raise InvalidReferenceError("module", module_id)
        stored = self._videos.add(replace(video, module_id=module_id))
        logger.info("Created video id=%s module=%d", stored.id, module_id)
        return stored

    def list_videos(self, module_id: int) -> list[Video]:
        return self._videos.list_by_module(module_id)

    # --- Assessments ---

    def add_assessment(self, module_id: int, assessment: Assessment) -> Assessment:
        if self._modules.get_by_id(module_id) is None:
            logger.warning("Rejected assessment for unknown module=%d", module_id)
            raise InvalidReferenceError("module", module_id)
        stored = self._assessments.add(replace(assessment, module_id=module_id))
        logger.info("Created assessment id=%s module=%d", stored.id, module_id)
        return stored

    def list_assessments(self, module_id: int) -> list[Assessment]:
        return self._assessments.list_by_module(module_id)

    # --- Questions ---

    def add_question(self, assessment_id: int, question: Question) -> Question:
        if self._assessments.get_by_id(assessment_id) is None:
            logger.warning(
                "Rejected question for unknown assessment=%d", assessment_id
            )
            raise InvalidReferenceError("assessment", assessment_id)
        stored = self._questions.add(replace(question, assessment_id=assessment_id))
        logger.info("Created question id=%s assessment=%d", stored.id, assessment_id)
        return stored

    def list_questions(self, assessment_id: int) -> list[Question]:
        return self._questions.list_by_assessment(assessment_id)
