"""Persisted course-content entities.

Ids are assigned by the repository on ``add``; an entity built with
``new()`` carries ``id=None`` until it has been stored.  Lock state is not
part of these records (see app/models/content_view.py).
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Course:
    id: int | None
    title: str
    description: str = ""
    price: float | None = None
    thumbnail_url: str | None = None

    @staticmethod
    def new(
        *,
        title: str,
        description: str = "",
        price: float | None = None,
        thumbnail_url: str | None = None,
    ) -> Course:
        return Course(
            id=None,
            title=title,
            description=description,
            price=price,
            thumbnail_url=thumbnail_url,
        )


@dataclass(frozen=True, slots=True)
class Module:
    id: int | None
    course_id: int | None
    title: str
    description: str = ""

    @staticmethod
    def new(*, title: str, description: str = "") -> Module:
        return Module(id=None, course_id=None, title=title, description=description)


@dataclass(frozen=True, slots=True)
class Video:
    id: int | None
    module_id: int | None
    title: str
    video_url: str = ""
    duration_seconds: int | None = None

    @staticmethod
    def new(
        *, title: str, video_url: str = "", duration_seconds: int | None = None
    ) -> Video:
        return Video(
            id=None,
            module_id=None,
            title=title,
            video_url=video_url,
            duration_seconds=duration_seconds,
        )


@dataclass(frozen=True, slots=True)
class Assessment:
    id: int | None
    module_id: int | None
    title: str
    description: str = ""

    @staticmethod
    def new(*, title: str, description: str = "") -> Assessment:
        return Assessment(
            id=None, module_id=None, title=title, description=description
        )


@dataclass(frozen=True, slots=True)
class Question:
    id: int | None
    assessment_id: int | None
    text: str
    options: tuple[str, ...] = ()
    correct_answer: str | None = None

    @staticmethod
    def new(
        *,
        text: str,
        options: tuple[str, ...] = (),
        correct_answer: str | None = None,
    ) -> Question:
        return Question(
            id=None,
            assessment_id=None,
            text=text,
            options=options,
            correct_answer=correct_answer,
        )


def require_id(entity_id: int | None, entity: str) -> int:
    """Narrow a stored entity's id; ids are only None before ``add``."""
    if entity_id is None:
        raise ValueError(f"{entity} has not been stored")
    return entity_id
