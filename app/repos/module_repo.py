from __future__ import annotations

import threading
from dataclasses import replace
from typing import Protocol

from app.models.course import Module


class ModuleRepo(Protocol):
    def get_by_id(self, module_id: int) -> Module | None: ...
    def list_by_course(self, course_id: int) -> list[Module]: ...
    def add(self, module: Module) -> Module: ...


class InMemoryModuleRepo:
    def __init__(self) -> None:
        self._by_id: dict[int, Module] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def get_by_id(self, module_id: int) -> Module | None:
        return self._by_id.get(module_id)

    def list_by_course(self, course_id: int) -> list[Module]:
        with self._lock:
            return [
                self._by_id[k]
                for k in sorted(self._by_id)
                if self._by_id[k].course_id == course_id
            ]

    def add(self, module: Module) -> Module:
        if module.course_id is None:
            raise ValueError("module must reference a course")
        with self._lock:
            stored = replace(module, id=self._next_id)
            self._by_id[stored.id] = stored
            self._next_id += 1
        return stored

    def clear(self) -> None:
        with self._lock:
            self._by_id.clear()
            self._next_id = 1
