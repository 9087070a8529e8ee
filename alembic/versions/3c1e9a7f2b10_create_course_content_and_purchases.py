"""create course content and purchases

Revision ID: 3c1e9a7f2b10
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3c1e9a7f2b10"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

# BIGINT ids; SQLite only autoincrements an INTEGER primary key.
_ID = sa.BigInteger().with_variant(sa.Integer(), "sqlite")


def upgrade() -> None:
    op.create_table(
        "courses",
        sa.Column("id", _ID, primary_key=True, autoincrement=True),
        sa.Column("title", sa.String(length=500), nullable=False),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column("price", sa.Float(), nullable=True),
        sa.Column("thumbnail_url", sa.Text(), nullable=True),
    )
    op.create_table(
        "modules",
        sa.Column("id", _ID, primary_key=True, autoincrement=True),
        sa.Column(
            "course_id", _ID, sa.ForeignKey("courses.id"), nullable=False
        ),
        sa.Column("title", sa.String(length=500), nullable=False),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
    )
    op.create_index("ix_modules_course_id", "modules", ["course_id"])
    op.create_table(
        "videos",
        sa.Column("id", _ID, primary_key=True, autoincrement=True),
        sa.Column(
            "module_id", _ID, sa.ForeignKey("modules.id"), nullable=False
        ),
        sa.Column("title", sa.String(length=500), nullable=False),
        sa.Column("video_url", sa.Text(), nullable=False, server_default=""),
        sa.Column("duration_seconds", sa.Integer(), nullable=True),
    )
    op.create_index("ix_videos_module_id", "videos", ["module_id"])
    op.create_table(
        "assessments",
        sa.Column("id", _ID, primary_key=True, autoincrement=True),
        sa.Column(
            "module_id", _ID, sa.ForeignKey("modules.id"), nullable=False
        ),
        sa.Column("title", sa.String(length=500), nullable=False),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
    )
    op.create_index("ix_assessments_module_id", "assessments", ["module_id"])
    op.create_table(
        "questions",
        sa.Column("id", _ID, primary_key=True, autoincrement=True),
        sa.Column(
            "assessment_id",
            _ID,
            sa.ForeignKey("assessments.id"),
            nullable=False,
        ),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("options", sa.JSON(), nullable=False),
        sa.Column("correct_answer", sa.Text(), nullable=True),
    )
    op.create_index("ix_questions_assessment_id", "questions", ["assessment_id"])
    op.create_table(
        "user_course_purchases",
        sa.Column("id", _ID, primary_key=True, autoincrement=True),
        sa.Column("user_id", _ID, nullable=False),
        sa.Column("course_id", _ID, nullable=False),
        sa.Column("purchase_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("order_id", sa.String(length=255), nullable=True),
        sa.Column("payment_id", sa.String(length=255), nullable=True),
        sa.Column(
            "status", sa.String(length=32), nullable=False, server_default="COMPLETED"
        ),
    )
    op.create_index(
        "ix_user_course_purchases_user_id", "user_course_purchases", ["user_id"]
    )
    op.create_index(
        "ix_user_course_purchases_course_id", "user_course_purchases", ["course_id"]
    )


def downgrade() -> None:
    op.drop_table("user_course_purchases")
    op.drop_table("questions")
    op.drop_table("assessments")
    op.drop_table("videos")
    op.drop_table("modules")
    op.drop_table("courses")
