from __future__ import annotations

import json

import pytest

from src.university_tracker.university_tracker.core.enums import Role


@pytest.fixture
def login(client, make_user):
    def _login(role: Role, email: str = None):
        email = email or f"{role.value}@example.com"
        make_user(email, password="password123", role=role)
        return client.post("/ui/login", data={"email": email, "password": "password123"})

    return _login


def test_dashboard_redirects_anonymous_users(client):
    res = client.get("/ui")

    assert res.status_code == 302
    assert res.headers["Location"].endswith("/ui/login")


def test_login_form_renders(client):
    res = client.get("/ui/login")

    assert res.status_code == 200
    assert b"password" in res.data


def test_bad_login_stays_on_form(client, make_user):
    make_user("admin@example.com", password="password123", role=Role.ADMIN)

    res = client.post("/ui/login", data={"email": "admin@example.com", "password": "nope"})

    assert res.status_code == 200
    assert b"Invalid credentials" in res.data


def test_admin_adds_student_from_dashboard(client, login, repos):
    assert login(Role.ADMIN).status_code == 302

    res = client.post(
        "/ui/students",
        data={"name": "Carol", "email": "carol@x.com", "enrollment_year": "2025"},
        follow_redirects=True,
    )

    assert res.status_code == 200
    assert b"Student added" in res.data
    assert b"Carol" in res.data
    assert [s.name for s in repos.students.list_all()] == ["Carol"]


def test_student_cannot_add_from_dashboard(client, login, repos):
    login(Role.STUDENT)

    res = client.post(
        "/ui/students",
        data={"name": "Carol", "email": "carol@x.com", "enrollment_year": "2025"},
        follow_redirects=True,
    )

    assert b"Admin only" in res.data
    assert repos.students.count() == 0


def test_mark_attendance_and_view_history(client, login, repos):
    sid = repos.students.create(name="Alice", email="alice@x.com", enrollment_year=2025)
    login(Role.FACULTY)

    res = client.post("/ui/attendance", data={"student_id": sid, "status": "Present"}, follow_redirects=True)
    assert b"Marked Present" in res.data

    res = client.get(f"/ui?history={sid}")
    assert f"Attendance for student #{sid}".encode() in res.data


def test_blank_note_is_rejected(client, login, repos):
    login(Role.STUDENT)

    res = client.post("/ui/comments", data={"title": "", "body": ""}, follow_redirects=True)

    assert b"Write title &amp; body" in res.data
    assert repos.comments.rows == []


def test_export_downloads_json(client, login, repos):
    repos.students.create(name="Alice", email="alice@x.com", enrollment_year=2025)
    login(Role.ADMIN)

    res = client.get("/ui/export")

    assert res.mimetype == "application/json"
    assert "attachment" in res.headers["Content-Disposition"]
    payload = json.loads(res.data)
    assert payload["students"][0]["name"] == "Alice"
    assert payload["stats"]["totalStudents"] == 1


def test_logout_clears_session(client, login):
    login(Role.ADMIN)

    client.get("/ui/logout")

    assert client.get("/ui").status_code == 302
