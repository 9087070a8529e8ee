"""SQLAlchemy table definitions.

These map to the frozen dataclass domain models in app/models/.
Repos convert between SQLAlchemy rows and domain dataclasses, so no
per-user lock state ever reaches a table.
"""

from __future__ import annotations

import datetime

from sqlalchemy import (
    JSON,
    BigInteger,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import Mapped, mapped_column

from app.db.engine import Base

# 64-bit ids; SQLite only autoincrements an INTEGER primary key.
BigIntId = BigInteger().with_variant(Integer, "sqlite")

# --- Course content ---


class CourseRow(Base):
    __tablename__ = "courses"

    id: Mapped[int] = mapped_column(BigIntId, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    price: Mapped[float | None] = mapped_column(Float, nullable=True)
    thumbnail_url: Mapped[str | None] = mapped_column(Text, nullable=True)


class ModuleRow(Base):
    __tablename__ = "modules"

    id: Mapped[int] = mapped_column(BigIntId, primary_key=True, autoincrement=True)
    course_id: Mapped[int] = mapped_column(
        BigIntId, ForeignKey("courses.id"), nullable=False, index=True
    )
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")


class VideoRow(Base):
    __tablename__ = "videos"

    id: Mapped[int] = mapped_column(BigIntId, primary_key=True, autoincrement=True)
    module_id: Mapped[int] = mapped_column(
        BigIntId, ForeignKey("modules.id"), nullable=False, index=True
    )
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    video_url: Mapped[str] = mapped_column(Text, nullable=False, default="")
    duration_seconds: Mapped[int | None] = mapped_column(Integer, nullable=True)


class AssessmentRow(Base):
    __tablename__ = "assessments"

    id: Mapped[int] = mapped_column(BigIntId, primary_key=True, autoincrement=True)
    module_id: Mapped[int] = mapped_column(
        BigIntId, ForeignKey("modules.id"), nullable=False, index=True
    )
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")


class QuestionRow(Base):
    __tablename__ = "questions"

    id: Mapped[int] = mapped_column(BigIntId, primary_key=True, autoincrement=True)
    assessment_id: Mapped[int] = mapped_column(
        BigIntId, ForeignKey("assessments.id"), nullable=False, index=True
    )
    text: Mapped[str] = mapped_column(Text, nullable=False)
    options: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    correct_answer: Mapped[str | None] = mapped_column(Text, nullable=True)


# --- Purchases ---


class PurchaseRow(Base):
    """One row per (user_id, course_id) in normal operation.

    No unique constraint: completion is check-then-insert, and concurrent
    duplicates are tolerated because access depends on existence only.
    """

    __tablename__ = "user_course_purchases"

    id: Mapped[int] = mapped_column(BigIntId, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(BigInteger, nullable=False, index=True)
    course_id: Mapped[int] = mapped_column(BigInteger, nullable=False, index=True)
    purchase_date: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )
    order_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    payment_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    status: Mapped[str] = mapped_column(
        String(32), nullable=False, default="COMPLETED"
    )
