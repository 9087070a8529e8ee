"""Read-side views of course content.

The persisted entities in app/models/course.py never carry per-user
state.  These wrappers hold the hierarchy as assembled for one request,
plus the ``locked``/``subscribed`` flags derived for the requesting user.
"""

from __future__ import annotations

from dataclasses import dataclass

from app.models.course import Assessment, Course, Module, Video


@dataclass(frozen=True, slots=True)
class ModuleTree:
    """A module with its videos and assessments in stable (id) order."""

    module: Module
    videos: tuple[Video, ...] = ()
    assessments: tuple[Assessment, ...] = ()


@dataclass(frozen=True, slots=True)
class VideoView:
    video: Video
    locked: bool


@dataclass(frozen=True, slots=True)
class AssessmentView:
    assessment: Assessment
    locked: bool


@dataclass(frozen=True, slots=True)
class ModuleView:
    module: Module
    locked: bool
    videos: tuple[VideoView, ...] = ()
    assessments: tuple[AssessmentView, ...] = ()


@dataclass(frozen=True, slots=True)
class CourseView:
    course: Course
    subscribed: bool
    modules: tuple[ModuleView, ...] = ()
