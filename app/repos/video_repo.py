from __future__ import annotations

import threading
from dataclasses import replace
from typing import Protocol

from app.models.course import Video


class VideoRepo(Protocol):
    def list_by_module(self, module_id: int) -> list[Video]: ...
    def add(self, video: Video) -> Video: ...


class InMemoryVideoRepo:
    def __init__(self) -> None:
        self._by_id: dict[int, Video] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def list_by_module(self, module_id: int) -> list[Video]:
        with self._lock:
            return [
                self._by_id[k]
                for k in sorted(self._by_id)
                if self._by_id[k].module_id == module_id
            ]

    def add(self, video: Video) -> Video:
        if video.module_id is None:
            raise ValueError("video must reference a module")
        with self._lock:
            stored = replace(video, id=self._next_id)
            self._by_id[stored.id] = stored
            self._next_id += 1
        return stored

    def clear(self) -> None:
        with self._lock:
            self._by_id.clear()
            self._next_id = 1
