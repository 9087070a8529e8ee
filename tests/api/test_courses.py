from __future__ import annotations

from fastapi.testclient import TestClient

from tests.conftest import seed_course


def _buy(client: TestClient, user_id: int, course_id: int) -> None:
    resp = client.post(
        "/api/course/purchase/complete",
        params={
            "userId": user_id,
            "courseId": course_id,
            "orderId": f"order-1-{user_id}-{course_id}",
            "paymentId": "pay_1",
        },
    )
    assert resp.status_code == 200


def test_create_course(client: TestClient) -> None:
    resp = client.post(
        "/api/courses",
        json={
            "title": "Python Basics",
            "description": "From zero",
            "price": 399,
            "thumbnailUrl": "https://cdn.example.com/py.png",
        },
    )

    assert resp.status_code == 200
    body = resp.json()
    assert isinstance(body["id"], int)
    assert body["title"] == "Python Basics"
    assert body["thumbnailUrl"] == "https://cdn.example.com/py.png"
    assert body["price"] == 399.0


def test_create_course_requires_title(client: TestClient) -> None:
    resp = client.post("/api/courses", json={"description": "no title"})

    assert resp.status_code == 400
    body = resp.json()
    assert body["success"] is False
    assert "title" in body["message"]


def test_create_course_rejects_empty_title(client: TestClient) -> None:
    resp = client.post("/api/courses", json={"title": ""})
    assert resp.status_code == 400
    assert resp.json()["success"] is False


def test_list_courses_empty(client: TestClient) -> None:
    resp = client.get("/api/courses")

    assert resp.status_code == 200
    assert resp.json() == {
        "data": [],
        "success": True,
        "message": "Courses retrieved successfully",
        "count": 0,
    }


def test_list_courses_anonymous_gets_preview(client: TestClient) -> None:
    seed_course()
    seed_course((("Only", ("intro",), ()),), title="Second")

    resp = client.get("/api/courses")

    body = resp.json()
    assert body["count"] == 2
    first, second = body["data"]
    assert first["title"] == "Python Basics"
    assert first["subscribed"] is False
    assert [m["locked"] for m in first["modules"]] == [False, True]
    assert [v["locked"] for v in second["modules"][0]["videos"]] == [False]


def test_get_course_scenario_without_purchase(client: TestClient) -> None:
    course = seed_course()

    resp = client.get(f"/api/courses/{course.id}", params={"userId": 7})

    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["message"] == "Course retrieved successfully"
    data = body["data"]
    assert data["subscribed"] is False
    a, b = data["modules"]
    assert (a["title"], a["locked"]) == ("A", False)
    assert (b["title"], b["locked"]) == ("B", True)
    assert [(v["title"], v["locked"]) for v in a["videos"]] == [
        ("v1", False),
        ("v2", True),
    ]
    assert [(v["title"], v["locked"]) for v in b["videos"]] == [("v3", True)]


def test_get_course_after_purchase_unlocks_all(client: TestClient) -> None:
    course = seed_course()
    _buy(client, 7, course.id)

    data = client.get(f"/api/courses/{course.id}", params={"userId": 7}).json()["data"]

    assert data["subscribed"] is True
    assert not any(m["locked"] for m in data["modules"])
    assert not any(v["locked"] for m in data["modules"] for v in m["videos"])


def test_purchase_is_per_user(client: TestClient) -> None:
    course = seed_course()
    _buy(client, 7, course.id)

    data = client.get(f"/api/courses/{course.id}", params={"userId": 8}).json()["data"]
    assert data["subscribed"] is False


def test_list_courses_marks_only_purchased_course(client: TestClient) -> None:
    owned = seed_course(title="Owned")
    seed_course(title="Other")
    _buy(client, 7, owned.id)

    data = client.get("/api/courses", params={"userId": 7}).json()["data"]

    assert [(c["title"], c["subscribed"]) for c in data] == [
        ("Owned", True),
        ("Other", False),
    ]


def test_module_zero_assessments_are_free(client: TestClient) -> None:
    course = seed_course((("A", ("v1",), ("q1", "q2")), ("B", (), ("q3",))))

    data = client.get(f"/api/courses/{course.id}").json()["data"]

    a, b = data["modules"]
    assert [x["locked"] for x in a["assessments"]] == [False, False]
    assert [x["locked"] for x in b["assessments"]] == [True]


def test_get_course_not_found(client: TestClient) -> None:
    resp = client.get("/api/courses/999", params={"userId": 7})

    assert resp.status_code == 404
    assert resp.json() == {"detail": "course not found"}
