from __future__ import annotations

import pytest

from app.core.errors import InvalidReferenceError
from app.models.course import Assessment, Course, Module, Question, Video
from tests.conftest import content_service, fresh_repos, seed_course


@pytest.fixture
def repos():
    return fresh_repos()


@pytest.fixture
def service(repos):
    return content_service(repos)


def test_create_course_assigns_ids(service) -> None:
    first = service.create_course(Course.new(title="One", price=99.0))
    second = service.create_course(Course.new(title="Two"))

    assert first.id is not None
    assert second.id is not None
    assert first.id != second.id
    assert first.price == 99.0


def test_list_courses_in_creation_order(service) -> None:
    for title in ("One", "Two", "Three"):
        service.create_course(Course.new(title=title))

    views = service.list_courses(None)

    assert [v.course.title for v in views] == ["One", "Two", "Three"]
    assert not any(v.subscribed for v in views)


def test_get_course_unknown_returns_none(service) -> None:
    assert service.get_course(999, 7) is None


def test_get_course_includes_lock_state(service) -> None:
    course = seed_course(service=service)

    view = service.get_course(course.id, None)

    assert view is not None
    assert [m.locked for m in view.modules] == [False, True]


def test_add_module_sets_parent(service) -> None:
    course = service.create_course(Course.new(title="C"))

    module = service.add_module(course.id, Module.new(title="Intro"))

    assert module.course_id == course.id
    assert [t.module.id for t in service.list_modules(course.id)] == [module.id]


def test_add_module_unknown_course(service, repos) -> None:
    with pytest.raises(InvalidReferenceError) as exc_info:
        service.add_module(999, Module.new(title="Orphan"))

    assert str(exc_info.value) == "Invalid courseId: 999"
    assert repos.modules.list_by_course(999) == []


def test_add_video_unknown_module(service) -> None:
    with pytest.raises(InvalidReferenceError, match="Invalid moduleId: 5"):
        service.add_video(5, Video.new(title="Lost"))


def test_add_assessment_unknown_module(service) -> None:
    with pytest.raises(InvalidReferenceError, match="Invalid moduleId: 5"):
        service.add_assessment(5, Assessment.new(title="Quiz"))


def test_add_question_unknown_assessment(service) -> None:
    with pytest.raises(InvalidReferenceError, match="Invalid assessmentId: 3"):
        service.add_question(3, Question.new(text="Why?"))


def test_get_module_loads_children(service) -> None:
    course = seed_course(
        (("A", ("v1", "v2"), ("quiz",)),), service=service
    )
    (tree,) = service.list_modules(course.id)

    loaded = service.get_module(tree.module.id)

    assert loaded is not None
    assert [v.title for v in loaded.videos] == ["v1", "v2"]
    assert [a.title for a in loaded.assessments] == ["quiz"]


def test_get_module_unknown_returns_none(service) -> None:
    assert service.get_module(404) is None


def test_questions_keep_options_and_order(service) -> None:
    course = seed_course((("A", (), ("quiz",)),), service=service)
    (tree,) = service.list_modules(course.id)
    (quiz,) = tree.assessments

    service.add_question(
        quiz.id,
        Question.new(text="2+2?", options=("3", "4"), correct_answer="4"),
    )
    service.add_question(quiz.id, Question.new(text="Capital of France?"))

    questions = service.list_questions(quiz.id)
    assert [q.text for q in questions] == ["2+2?", "Capital of France?"]
    assert questions[0].options == ("3", "4")
    assert questions[0].assessment_id == quiz.id


def test_children_listed_per_parent(service) -> None:
    course = seed_course(
        (("A", ("v1",), ("qa",)), ("B", ("v2", "v3"), ())), service=service
    )
    a, b = service.list_modules(course.id)

    assert [v.title for v in service.list_videos(b.module.id)] == ["v2", "v3"]
    assert [x.title for x in service.list_assessments(a.module.id)] == ["qa"]
    assert service.list_assessments(b.module.id) == []
