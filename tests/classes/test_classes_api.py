from __future__ import annotations

from src.university_tracker.university_tracker.core.enums import Role

MATHS = {"course_name": "Maths", "schedule_day": "Monday", "start_time": "09:00", "end_time": "10:30"}


def test_faculty_creates_class_owned_by_caller(client, auth_headers, make_user, repos):
    prof = make_user("prof@x.com", role=Role.FACULTY)

    res = client.post("/classes", json=MATHS, headers=auth_headers(Role.FACULTY, user=prof))

    assert res.status_code == 201
    body = res.get_json()
    assert body["faculty_id"] == prof.id
    assert body["start_time"] == "09:00:00"
    assert repos.classes.get_by_id(body["id"]).course_name == "Maths"


def test_student_cannot_create_class(client, auth_headers, repos):
    res = client.post("/classes", json=MATHS, headers=auth_headers(Role.STUDENT))

    assert res.status_code == 403
    assert repos.classes.rows == {}


def test_end_before_start_is_400(client, auth_headers):
    res = client.post(
        "/classes",
        json={**MATHS, "start_time": "11:00", "end_time": "10:00"},
        headers=auth_headers(Role.FACULTY),
    )

    assert res.status_code == 400


def test_lectures_for_own_class(client, auth_headers, make_user):
    prof = make_user("prof@x.com", role=Role.FACULTY)
    headers = auth_headers(Role.FACULTY, user=prof)
    class_id = client.post("/classes", json=MATHS, headers=headers).get_json()["id"]

    res = client.post(
        "/lectures",
        json={"class_id": class_id, "topic": "Limits", "lecture_date": "2025-03-03"},
        headers=headers,
    )
    assert res.status_code == 201

    by_path = client.get(f"/lectures/{class_id}", headers=auth_headers(Role.STUDENT)).get_json()
    by_query = client.get(f"/lectures?class_id={class_id}", headers=auth_headers(Role.STUDENT)).get_json()
    assert [lec["topic"] for lec in by_path] == ["Limits"]
    assert by_query == by_path
    assert by_path[0]["lecture_date"] == "2025-03-03"


def test_faculty_cannot_add_lecture_to_foreign_class(client, auth_headers, make_user):
    owner = make_user("owner@x.com", role=Role.FACULTY)
    other = make_user("other@x.com", role=Role.FACULTY)
    class_id = client.post("/classes", json=MATHS, headers=auth_headers(Role.FACULTY, user=owner)).get_json()["id"]

    res = client.post(
        "/lectures",
        json={"class_id": class_id, "topic": "Limits", "lecture_date": "2025-03-03"},
        headers=auth_headers(Role.FACULTY, user=other),
    )

    assert res.status_code == 403


def test_admin_may_add_lecture_to_any_class(client, auth_headers, make_user):
    owner = make_user("owner@x.com", role=Role.FACULTY)
    class_id = client.post("/classes", json=MATHS, headers=auth_headers(Role.FACULTY, user=owner)).get_json()["id"]

    res = client.post(
        "/lectures",
        json={"class_id": class_id, "topic": "Series", "lecture_date": "2025-03-04"},
        headers=auth_headers(Role.ADMIN),
    )

    assert res.status_code == 201


def test_lecture_for_missing_class_is_404(client, auth_headers):
    res = client.post(
        "/lectures",
        json={"class_id": 99, "topic": "Limits", "lecture_date": "2025-03-03"},
        headers=auth_headers(Role.ADMIN),
    )

    assert res.status_code == 404


def test_lectures_query_requires_class_id(client, auth_headers):
    assert client.get("/lectures", headers=auth_headers(Role.STUDENT)).status_code == 400
