from __future__ import annotations

import threading
from dataclasses import replace
from typing import Protocol

from app.models.course import Question


class QuestionRepo(Protocol):
    def list_by_assessment(self, assessment_id: int) -> list[Question]: ...
    def add(self, question: Question) -> Question: ...


class InMemoryQuestionRepo:
    def __init__(self) -> None:
        self._by_id: dict[int, Question] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def list_by_assessment(self, assessment_id: int) -> list[Question]:
        with self._lock:
            return [
                self._by_id[k]
                for k in sorted(self._by_id)
                if self._by_id[k].assessment_id == assessment_id
            ]

    def add(self, question: Question) -> Question:
        if question.assessment_id is None:
            raise ValueError("question must reference an assessment")
        with self._lock:
            stored = replace(question, id=self._next_id)
            self._by_id[stored.id] = stored
            self._next_id += 1
        return stored

    def clear(self) -> None:
        with self._lock:
            self._by_id.clear()
            self._next_id = 1
