"""Module, video, assessment and question endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient


def _course(client: TestClient, title: str = "C") -> int:
    return client.post("/api/courses", json={"title": title}).json()["id"]


def _module(client: TestClient, course_id: int, title: str = "M") -> int:
    resp = client.post(
        "/api/modules", params={"courseId": course_id}, json={"title": title}
    )
    assert resp.status_code == 200
    return resp.json()["id"]


# ---- modules ----


def test_add_module(client: TestClient) -> None:
    course_id = _course(client)

    resp = client.post(
        "/api/modules",
        params={"courseId": course_id},
        json={"title": "Intro", "description": "Start here"},
    )

    assert resp.status_code == 200
    body = resp.json()
    assert body["courseId"] == course_id
    assert body["title"] == "Intro"
    assert body["videos"] == []


def test_add_module_unknown_course(client: TestClient) -> None:
    resp = client.post("/api/modules", params={"courseId": 999}, json={"title": "X"})

    assert resp.status_code == 400
    assert resp.json() == {"success": False, "message": "Invalid courseId: 999"}


def test_add_module_requires_course_id(client: TestClient) -> None:
    resp = client.post("/api/modules", json={"title": "X"})

    assert resp.status_code == 400
    body = resp.json()
    assert body["success"] is False
    assert "courseId" in body["message"]


def test_list_modules_by_course_with_children(client: TestClient) -> None:
    course_id = _course(client)
    first = _module(client, course_id, "First")
    _module(client, course_id, "Second")
    client.post("/api/videos", params={"moduleId": first}, json={"title": "v1"})

    resp = client.get(f"/api/modules/course/{course_id}")

    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["count"] == 2
    assert [m["title"] for m in body["data"]] == ["First", "Second"]
    assert [v["title"] for v in body["data"][0]["videos"]] == ["v1"]
    # Module listings carry no user, so nothing is reported locked.
    assert not any(m["locked"] for m in body["data"])


def test_list_modules_unknown_course_is_empty(client: TestClient) -> None:
    body = client.get("/api/modules/course/999").json()
    assert body["data"] == []
    assert body["count"] == 0


def test_get_module(client: TestClient) -> None:
    module_id = _module(client, _course(client), "Only")
    client.post("/api/assessments", params={"moduleId": module_id}, json={"title": "Q"})

    resp = client.get(f"/api/modules/{module_id}")

    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["id"] == module_id
    assert [a["title"] for a in data["assessments"]] == ["Q"]


def test_get_module_not_found(client: TestClient) -> None:
    resp = client.get("/api/modules/999")
    assert resp.status_code == 404
    assert resp.json() == {"detail": "module not found"}


# ---- videos ----


def test_add_and_list_videos(client: TestClient) -> None:
    module_id = _module(client, _course(client))

    resp = client.post(
        "/api/videos",
        params={"moduleId": module_id},
        json={"title": "Setup", "videoUrl": "https://v/1", "durationSeconds": 300},
    )
    assert resp.status_code == 200
    assert resp.json()["moduleId"] == module_id
    assert resp.json()["durationSeconds"] == 300
    client.post("/api/videos", params={"moduleId": module_id}, json={"title": "Next"})

    body = client.get(f"/api/modules/{module_id}/videos").json()

    assert body["count"] == 2
    assert [v["title"] for v in body["data"]] == ["Setup", "Next"]
    assert body["data"][0]["videoUrl"] == "https://v/1"


def test_add_video_unknown_module(client: TestClient) -> None:
    resp = client.post("/api/videos", params={"moduleId": 42}, json={"title": "X"})

    assert resp.status_code == 400
    assert resp.json()["message"] == "Invalid moduleId: 42"


def test_add_video_rejects_negative_duration(client: TestClient) -> None:
    module_id = _module(client, _course(client))
    resp = client.post(
        "/api/videos",
        params={"moduleId": module_id},
        json={"title": "X", "durationSeconds": -1},
    )
    assert resp.status_code == 400
    assert "durationSeconds" in resp.json()["message"]


# ---- assessments and questions ----


def test_add_and_list_assessments(client: TestClient) -> None:
    module_id = _module(client, _course(client))

    resp = client.post(
        "/api/assessments",
        params={"moduleId": module_id},
        json={"title": "Quiz 1", "description": "Basics"},
    )
    assert resp.status_code == 200
    assert resp.json()["title"] == "Quiz 1"

    body = client.get(f"/api/modules/{module_id}/assessments").json()
    assert body["count"] == 1
    assert body["data"][0]["moduleId"] == module_id


def test_add_assessment_unknown_module(client: TestClient) -> None:
    resp = client.post("/api/assessments", params={"moduleId": 5}, json={"title": "Q"})
    assert resp.status_code == 400
    assert resp.json()["message"] == "Invalid moduleId: 5"


def test_add_and_list_questions(client: TestClient) -> None:
    module_id = _module(client, _course(client))
    assessment_id = client.post(
        "/api/assessments", params={"moduleId": module_id}, json={"title": "Q"}
    ).json()["id"]

    resp = client.post(
        "/api/questions",
        params={"assessmentId": assessment_id},
        json={"text": "2+2?", "options": ["3", "4"], "correctAnswer": "4"},
    )
    assert resp.status_code == 200
    assert resp.json()["assessmentId"] == assessment_id

    body = client.get(f"/api/assessments/{assessment_id}/questions").json()

    assert body["assessmentId"] == assessment_id
    assert body["success"] is True
    assert body["count"] == 1
    (question,) = body["questions"]
    assert question["options"] == ["3", "4"]
    assert question["correctAnswer"] == "4"


def test_add_question_unknown_assessment(client: TestClient) -> None:
    resp = client.post(
        "/api/questions", params={"assessmentId": 3}, json={"text": "Why?"}
    )
    assert resp.status_code == 400
    assert resp.json() == {"success": False, "message": "Invalid assessmentId: 3"}


def test_list_questions_for_unknown_assessment_is_empty(client: TestClient) -> None:
    body = client.get("/api/assessments/77/questions").json()
    assert body["questions"] == []
    assert body["count"] == 0


def test_add_question_requires_text(client: TestClient) -> None:
    resp = client.post(
        "/api/questions", params={"assessmentId": 1}, json={"options": ["a"]}
    )

    assert resp.status_code == 400
    body = resp.json()
    assert set(body) == {"success", "message"}
    assert body["success"] is False
    assert body["message"].startswith("Validation failed - ")


def test_read_routes_keep_default_validation_status(client: TestClient) -> None:
    resp = client.get("/api/modules/not-a-number")

    assert resp.status_code == 422
    assert "detail" in resp.json()
