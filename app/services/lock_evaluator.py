"""Per-user lock state for course content.

Non-purchasers see a free preview:
  - module 0 and every assessment in module 0
  - the first video of module 0
Everything else is locked.  Purchasers see everything unlocked.

``evaluate`` is a pure function of (content, purchased); ``LockEvaluator``
adds the lookups (purchase check, lazy hierarchy load) around it.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from app.models.content_view import (
    AssessmentView,
    CourseView,
    ModuleTree,
    ModuleView,
    VideoView,
)
from app.models.course import Course, Module, require_id
from app.repos.assessment_repo import AssessmentRepo
from app.repos.module_repo import ModuleRepo
from app.repos.purchase_repo import PurchaseRepo
from app.repos.video_repo import VideoRepo
from app.services.purchase_service import has_purchased

logger = logging.getLogger(__name__)


def evaluate(
    course: Course, modules: Sequence[ModuleTree], purchased: bool
) -> CourseView:
    module_views: list[ModuleView] = []
    for i, tree in enumerate(modules):
        videos = tuple(
            VideoView(video=v, locked=False if purchased else not (i == 0 and j == 0))
            for j, v in enumerate(tree.videos)
        )
        assessments = tuple(
            AssessmentView(assessment=a, locked=False if purchased else i != 0)
            for a in tree.assessments
        )
        module_views.append(
            ModuleView(
                module=tree.module,
                locked=False if purchased else i != 0,
                videos=videos,
                assessments=assessments,
            )
        )
    return CourseView(course=course, subscribed=purchased, modules=tuple(module_views))


class LockEvaluator:
    def __init__(
        self,
        module_repo: ModuleRepo,
        video_repo: VideoRepo,
        assessment_repo: AssessmentRepo,
        purchase_repo: PurchaseRepo,
    ) -> None:
        self._modules = module_repo
        self._videos = video_repo
        self._assessments = assessment_repo
        self._purchases = purchase_repo

    def load_tree(self, module: Module) -> ModuleTree:
        module_id = require_id(module.id, "module")
        return ModuleTree(
            module=module,
            videos=tuple(self._videos.list_by_module(module_id)),
            assessments=tuple(self._assessments.list_by_module(module_id)),
        )

    def load_modules(self, course_id: int) -> list[ModuleTree]:
        return [self.load_tree(m) for m in self._modules.list_by_course(course_id)]

    def evaluate(
        self,
        course: Course,
        user_id: int | None,
        modules: Sequence[ModuleTree] | None = None,
    ) -> CourseView:
        """Return the course as seen by ``user_id`` (None or <= 0: anonymous)."""
        course_id = require_id(course.id, "course")
        purchased = has_purchased(self._purchases, user_id, course_id)
        if modules is None:
            modules = self.load_modules(course_id)
        logger.debug(
            "Lock state course=%d user=%s purchased=%s modules=%d",
            course_id,
            user_id,
            purchased,
            len(modules),
        )
        return evaluate(course, modules, purchased)
