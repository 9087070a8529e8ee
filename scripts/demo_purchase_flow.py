"""Demo: build a course, then walk the preview → purchase → unlock flow.

Runs against the in-memory repositories through FastAPI TestClient:
    python scripts/demo_purchase_flow.py
"""

from __future__ import annotations

from fastapi.testclient import TestClient

from app.main import app

USER_ID = 7


def _locks(course: dict) -> str:
    parts = []
    for m in course["modules"]:
        videos = ",".join(
            f"{v['title']}{'🔒' if v['locked'] else ''}" for v in m["videos"]
        )
        parts.append(f"{m['title']}{'🔒' if m['locked'] else ''}[{videos}]")
    return " ".join(parts)


def main() -> None:
    client = TestClient(app)

    # ── Seed content ────────────────────────────────────────────────
    course_id = client.post(
        "/api/courses", json={"title": "Python Basics", "price": 399}
    ).json()["id"]
    for module_title, videos in (("A", ("v1", "v2")), ("B", ("v3",))):
        module_id = client.post(
            "/api/modules",
            params={"courseId": course_id},
            json={"title": module_title},
        ).json()["id"]
        for title in videos:
            client.post(
                "/api/videos", params={"moduleId": module_id}, json={"title": title}
            )
    print(f"1. Seeded course {course_id}")

    # ── Step 2: preview as a non-purchaser ──────────────────────────
    r = client.get(f"/api/courses/{course_id}", params={"userId": USER_ID})
    data = r.json()["data"]
    print(
        f"2. GET  /api/courses/{course_id}   → {r.status_code}  "
        f"subscribed={data['subscribed']}  {_locks(data)}"
    )

    # ── Step 3: create an order ─────────────────────────────────────
    r = client.post(
        "/api/course/purchase", params={"userId": USER_ID, "courseId": course_id}
    )
    order = r.json()
    print(
        f"3. POST /api/course/purchase → {r.status_code}  "
        f"orderId={order['orderId']}  {order['amount']} {order['currency']}"
    )

    # ── Step 4: gateway callback ────────────────────────────────────
    r = client.post(
        "/api/payments/verify",
        json={"orderId": order["orderId"], "paymentId": "pay_demo", "signature": "x"},
    )
    print(f"4. POST /api/payments/verify → {r.status_code}  {r.json()['message']}")

    # ── Step 5: status and unlocked course ──────────────────────────
    r = client.get(
        "/api/course/purchased", params={"userId": USER_ID, "courseId": course_id}
    )
    print(
        f"5. GET  /api/course/purchased → {r.status_code}  "
        f"purchased={r.json()['purchased']}"
    )
    r = client.get(f"/api/courses/{course_id}", params={"userId": USER_ID})
    data = r.json()["data"]
    print(f"   subscribed={data['subscribed']}  {_locks(data)}")

    # ── Step 6: ordering again ──────────────────────────────────────
    r = client.post(
        "/api/course/purchase", params={"userId": USER_ID, "courseId": course_id}
    )
    print(
        f"6. POST /api/course/purchase (again) → {r.status_code}  "
        f"orderId={r.json()['orderId']}"
    )

    print("\nAll steps completed.")


if __name__ == "__main__":
    main()
