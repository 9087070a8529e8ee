from __future__ import annotations

import threading
from dataclasses import replace
from typing import Protocol

from app.models.course import Course


class CourseRepo(Protocol):
    def get_by_id(self, course_id: int) -> Course | None: ...
    def list_all(self) -> list[Course]: ...
    def add(self, course: Course) -> Course: ...


class InMemoryCourseRepo:
    def __init__(self) -> None:
        self._by_id: dict[int, Course] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def get_by_id(self, course_id: int) -> Course | None:
        return self._by_id.get(course_id)

    def list_all(self) -> list[Course]:
        with self._lock:
            return [self._by_id[k] for k in sorted(self._by_id)]

    def add(self, course: Course) -> Course:
        with self._lock:
            stored = replace(course, id=self._next_id)
            self._by_id[stored.id] = stored
            self._next_id += 1
        return stored

    def clear(self) -> None:
        with self._lock:
            self._by_id.clear()
            self._next_id = 1
