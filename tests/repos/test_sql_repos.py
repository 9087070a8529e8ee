"""SQL repositories against an in-memory SQLite database."""

from __future__ import annotations

import datetime
from collections.abc import Generator

import pytest
from sqlalchemy.dialects import postgresql
from sqlalchemy.orm import Session
from sqlalchemy.schema import CreateTable

import app.db.tables  # noqa: F401  (registers tables on Base.metadata)
from app.api.dependencies import sql_repos
from app.db.engine import Base, build_engine, build_session_factory
from app.models.course import Assessment, Course, Module, Question, Video
from app.models.purchase import Purchase
from app.services.purchase_service import OrderInfo, PurchaseReceipt, PurchaseService
from tests.conftest import content_service, seed_course


@pytest.fixture
def session() -> Generator[Session, None, None]:
    engine = build_engine("sqlite://")
    Base.metadata.create_all(engine)
    factory = build_session_factory(engine)
    with factory() as s:
        yield s
    engine.dispose()


@pytest.fixture
def repos(session: Session):
    return sql_repos(session)


def test_course_add_and_get(repos) -> None:
    stored = repos.courses.add(
        Course.new(title="SQL 101", description="joins", price=199.0)
    )

    assert stored.id is not None
    assert repos.courses.get_by_id(stored.id) == stored
    assert repos.courses.get_by_id(stored.id + 1) is None


def test_courses_listed_in_id_order(repos) -> None:
    for title in ("B", "A", "C"):
        repos.courses.add(Course.new(title=title))
    assert [c.title for c in repos.courses.list_all()] == ["B", "A", "C"]


def test_children_filtered_by_parent(repos) -> None:
    c = repos.courses.add(Course.new(title="C"))
    m1 = repos.modules.add(Module(id=None, course_id=c.id, title="m1"))
    m2 = repos.modules.add(Module(id=None, course_id=c.id, title="m2"))
    repos.videos.add(Video(id=None, module_id=m1.id, title="v1", video_url="u"))
    repos.videos.add(Video(id=None, module_id=m2.id, title="v2"))
    quiz = repos.assessments.add(Assessment(id=None, module_id=m1.id, title="q"))

    assert [m.title for m in repos.modules.list_by_course(c.id)] == ["m1", "m2"]
    assert [v.title for v in repos.videos.list_by_module(m1.id)] == ["v1"]
    assert repos.videos.list_by_module(m1.id)[0].video_url == "u"
    assert repos.assessments.list_by_module(m2.id) == []
    assert repos.assessments.get_by_id(quiz.id) == quiz
    assert repos.modules.get_by_id(m2.id) == m2


def test_question_options_round_trip_as_tuple(repos) -> None:
    c = repos.courses.add(Course.new(title="C"))
    m = repos.modules.add(Module(id=None, course_id=c.id, title="m"))
    a = repos.assessments.add(Assessment(id=None, module_id=m.id, title="a"))

    repos.questions.add(
        Question(
            id=None,
            assessment_id=a.id,
            text="2+2?",
            options=("3", "4", "5"),
            correct_answer="4",
        )
    )
    repos.questions.add(Question(id=None, assessment_id=a.id, text="Open?"))

    first, second = repos.questions.list_by_assessment(a.id)
    assert first.options == ("3", "4", "5")
    assert first.correct_answer == "4"
    assert second.options == ()


def test_unparented_children_rejected(repos) -> None:
    with pytest.raises(ValueError, match="must reference a course"):
        repos.modules.add(Module.new(title="orphan"))
    with pytest.raises(ValueError, match="must reference a module"):
        repos.videos.add(Video.new(title="orphan"))


def test_purchase_exists_and_get(repos) -> None:
    when = datetime.datetime(2024, 1, 15, 10, 30, tzinfo=datetime.UTC)
    assert repos.purchases.exists(7, 1) is False
    assert repos.purchases.get(7, 1) is None

    stored = repos.purchases.add(
        Purchase.completed(
            user_id=7,
            course_id=1,
            order_id="order-1-7-1",
            payment_id="pay_1",
            purchase_date=when,
        )
    )

    assert stored.id is not None
    assert repos.purchases.exists(7, 1) is True
    assert repos.purchases.exists(7, 2) is False
    fetched = repos.purchases.get(7, 1)
    assert fetched is not None
    assert fetched.order_id == "order-1-7-1"
    assert fetched.status == "COMPLETED"
    # SQLite drops the offset; compare wall-clock values.
    assert fetched.purchase_date.replace(tzinfo=None) == when.replace(tzinfo=None)


def test_purchase_flow_over_sql(repos) -> None:
    course = seed_course(service=content_service(repos))
    purchases = PurchaseService(repos.purchases)

    order = purchases.create_order(7, course.id)
    assert isinstance(order, OrderInfo)
    receipt = purchases.verify_and_complete(order.order_id, "pay_1", "sig")
    assert isinstance(receipt, PurchaseReceipt)
    assert receipt.newly_recorded is True

    view = content_service(repos).get_course(course.id, 7)
    assert view is not None
    assert view.subscribed is True
    assert not any(m.locked for m in view.modules)

    again = purchases.create_order(7, course.id)
    assert isinstance(again, OrderInfo)
    assert again.order_id == f"existing-7-{course.id}"


def test_purchase_ids_beyond_32_bits(repos) -> None:
    user_id = 3_000_000_000
    course_id = 2**40
    repos.purchases.add(
        Purchase.completed(
            user_id=user_id,
            course_id=course_id,
            order_id=f"order-1-{user_id}-{course_id}",
            payment_id="pay_1",
            purchase_date=datetime.datetime(2024, 1, 15, tzinfo=datetime.UTC),
        )
    )

    assert repos.purchases.exists(user_id, course_id) is True
    fetched = repos.purchases.get(user_id, course_id)
    assert fetched is not None
    assert (fetched.user_id, fetched.course_id) == (user_id, course_id)


@pytest.mark.parametrize(
    "table", ["courses", "modules", "videos", "assessments", "questions"]
)
def test_postgres_ids_are_bigint(table: str) -> None:
    ddl = str(
        CreateTable(Base.metadata.tables[table]).compile(
            dialect=postgresql.dialect()
        )
    )
    assert "id BIGSERIAL" in ddl
    for column in ("course_id", "module_id", "assessment_id"):
        if f"\t{column} " in ddl:
            assert f"\t{column} BIGINT" in ddl


def test_postgres_purchase_columns_are_bigint() -> None:
    ddl = str(
        CreateTable(Base.metadata.tables["user_course_purchases"]).compile(
            dialect=postgresql.dialect()
        )
    )
    assert "id BIGSERIAL" in ddl
    assert "\tuser_id BIGINT NOT NULL" in ddl
    assert "\tcourse_id BIGINT NOT NULL" in ddl
