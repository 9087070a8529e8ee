from __future__ import annotations

import threading
from dataclasses import replace
from typing import Protocol

from app.models.course import Assessment


class AssessmentRepo(Protocol):
    def get_by_id(self, assessment_id: int) -> Assessment | None: ...
    def list_by_module(self, module_id: int) -> list[Assessment]: ...
    def add(self, assessment: Assessment) -> Assessment: ...


class InMemoryAssessmentRepo:
    def __init__(self) -> None:
        self._by_id: dict[int, Assessment] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def get_by_id(self, assessment_id: int) -> Assessment | None:
        return self._by_id.get(assessment_id)

    def list_by_module(self, module_id: int) -> list[Assessment]:
        with self._lock:
            return [
                self._by_id[k]
                for k in sorted(self._by_id)
                if self._by_id[k].module_id == module_id
            ]

    def add(self, assessment: Assessment) -> Assessment:
        if assessment.module_id is None:
            raise ValueError("assessment must reference a module")
        with self._lock:
            stored = replace(assessment, id=self._next_id)
            self._by_id[stored.id] = stored
            self._next_id += 1
        return stored

    def clear(self) -> None:
        with self._lock:
            self._by_id.clear()
            self._next_id = 1
