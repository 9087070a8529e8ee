"""Domain errors raised by the content services.

The API layer registers handlers for these in app/main.py, so services
never import FastAPI or know about status codes.
"""

from __future__ import annotations


class ContentError(Exception):
    """Base class for course-content domain errors."""


class InvalidReferenceError(ContentError):
    """A parent id supplied on an add-operation does not resolve (HTTP 400)."""

    def __init__(self, entity: str, entity_id: int | None) -> None:
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"Invalid {entity}Id: {entity_id}")


class NotFoundError(ContentError):
    """A requested entity does not exist (HTTP 404)."""

    def __init__(self, entity: str, entity_id: int | None) -> None:
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found")
