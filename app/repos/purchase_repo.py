from __future__ import annotations

import threading
from dataclasses import replace
from typing import Protocol

from app.models.purchase import Purchase


class PurchaseRepo(Protocol):
    def exists(self, user_id: int, course_id: int) -> bool: ...
    def get(self, user_id: int, course_id: int) -> Purchase | None: ...
    def add(self, purchase: Purchase) -> Purchase: ...


class InMemoryPurchaseRepo:
    def __init__(self) -> None:
        self._rows: list[Purchase] = []
        self._next_id = 1
        self._lock = threading.Lock()

    def exists(self, user_id: int, course_id: int) -> bool:
        return self.get(user_id, course_id) is not None

    def get(self, user_id: int, course_id: int) -> Purchase | None:
        with self._lock:
            for p in self._rows:
                if p.user_id == user_id and p.course_id == course_id:
                    return p
        return None

    def add(self, purchase: Purchase) -> Purchase:
        # Duplicates are the caller's concern; completion checks exists() first.
        with self._lock:
            stored = replace(purchase, id=self._next_id)
            self._rows.append(stored)
            self._next_id += 1
        return stored

    def count(self) -> int:
        with self._lock:
            return len(self._rows)

    def clear(self) -> None:
        with self._lock:
            self._rows.clear()
            self._next_id = 1
