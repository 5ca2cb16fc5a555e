from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from types import SimpleNamespace
from typing import Optional

import pytest
from werkzeug.security import generate_password_hash

from src.university_tracker.university_tracker import create_app
from src.university_tracker.university_tracker.assignments.model import Assignment, Submission
from src.university_tracker.university_tracker.attendance.model import AttendanceRecord, TrendPoint
from src.university_tracker.university_tracker.auth.tokens import TokenService
from src.university_tracker.university_tracker.classes.model import ClassSession, Lecture
from src.university_tracker.university_tracker.comments.model import Comment
from src.university_tracker.university_tracker.container import wire_container
from src.university_tracker.university_tracker.core.enums import AttendanceStatus, Role
from src.university_tracker.university_tracker.students.model import Student
from src.university_tracker.university_tracker.users.model import User

JWT_SECRET = "test-jwt-secret-key-0123456789abcdef"


class InMemoryUsers:
    def __init__(self):
        self._by_id: dict[int, User] = {}

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self._by_id.get(user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self._by_id.values() if u.email == email), None)

    def create_user(self, *, email: str, password_hash: str, role: Role) -> int:
        uid = len(self._by_id) + 1
        self._by_id[uid] = User(id=uid, email=email, password_hash=password_hash, role=role)
        return uid


class InMemoryStudents:
    def __init__(self):
        self.rows: dict[int, Student] = {}
        self._id = 0

    def list_all(self):
        return sorted(self.rows.values(), key=lambda s: s.id, reverse=True)

    def get_by_id(self, student_id: int) -> Optional[Student]:
        return self.rows.get(student_id)

    def get_by_user_id(self, user_id: int) -> Optional[Student]:
        return next((s for s in self.rows.values() if s.user_id == user_id), None)

    def create(self, *, name, email, enrollment_year, user_id=None) -> int:
        self._id += 1
        self.rows[self._id] = Student(
            id=self._id, name=name, email=email, enrollment_year=enrollment_year, user_id=user_id
        )
        return self._id

    def update(self, *, student_id, name, email, enrollment_year) -> bool:
        current = self.rows.get(student_id)
        if not current:
            return False
        self.rows[student_id] = replace(current, name=name, email=email, enrollment_year=enrollment_year)
        return True

    def delete(self, *, student_id) -> bool:
        return self.rows.pop(student_id, None) is not None

    def count(self) -> int:
        return len(self.rows)


class InMemoryAttendance:
    """Keyed on (student_id, date) like the unique index in schema.sql."""

    def __init__(self):
        self.rows: dict[tuple[int, date], AttendanceStatus] = {}

    def upsert(self, *, student_id: int, day: date, status: AttendanceStatus) -> None:
        self.rows[(student_id, day)] = status

    def list_for_student(self, student_id: int):
        items = [
            AttendanceRecord(student_id=sid, date=day, status=status)
            for (sid, day), status in self.rows.items()
            if sid == student_id
        ]
        return sorted(items, key=lambda r: r.date, reverse=True)

    def count_all(self) -> int:
        return len(self.rows)

    def count_by_status(self, status: AttendanceStatus) -> int:
        return sum(1 for s in self.rows.values() if s == status)

    def daily_counts(self, *, since: date):
        days: dict[date, list[int]] = {}
        for (_, day), status in self.rows.items():
            if day < since:
                continue
            bucket = days.setdefault(day, [0, 0])
            bucket[0] += 1 if status == AttendanceStatus.PRESENT else 0
            bucket[1] += 1
        return [TrendPoint(date=d, present=p, total=t) for d, (p, t) in sorted(days.items())]


class InMemoryClasses:
    def __init__(self):
        self.rows: dict[int, ClassSession] = {}

    def list_all(self):
        return sorted(self.rows.values(), key=lambda c: (c.schedule_day, c.start_time))

    def list_for_faculty(self, faculty_id: int):
        return [c for c in self.list_all() if c.faculty_id == faculty_id]

    def get_by_id(self, class_id: int):
        return self.rows.get(class_id)

    def create(self, *, course_name, faculty_id, schedule_day, start_time, end_time) -> int:
        cid = len(self.rows) + 1
        self.rows[cid] = ClassSession(
            id=cid,
            course_name=course_name,
            faculty_id=faculty_id,
            schedule_day=schedule_day,
            start_time=start_time,
            end_time=end_time,
        )
        return cid


class InMemoryLectures:
    def __init__(self):
        self.rows: list[Lecture] = []

    def create(self, *, class_id, topic, lecture_date) -> int:
        lid = len(self.rows) + 1
        self.rows.append(Lecture(id=lid, class_id=class_id, topic=topic, lecture_date=lecture_date))
        return lid

    def list_for_class(self, class_id: int):
        return sorted((r for r in self.rows if r.class_id == class_id), key=lambda r: r.lecture_date, reverse=True)


class InMemoryAssignments:
    def __init__(self, classes: InMemoryClasses):
        self._classes = classes
        self.rows: dict[int, Assignment] = {}

    def _joined(self, a: Assignment) -> Assignment:
        klass = self._classes.get_by_id(a.class_id)
        return replace(a, course_name=klass.course_name if klass else None)

    def create(self, *, class_id, title, description, due_date) -> int:
        aid = len(self.rows) + 1
        self.rows[aid] = Assignment(id=aid, class_id=class_id, title=title, description=description, due_date=due_date)
        return aid

    def get_by_id(self, assignment_id: int):
        a = self.rows.get(assignment_id)
        return self._joined(a) if a else None

    def list_all(self):
        return [self._joined(a) for a in sorted(self.rows.values(), key=lambda a: a.due_date)]

    def list_for_class(self, class_id: int):
        return sorted((a for a in self.rows.values() if a.class_id == class_id), key=lambda a: a.due_date)

    def list_for_faculty(self, faculty_id: int):
        owned = {c.id for c in self._classes.list_for_faculty(faculty_id)}
        return [a for a in self.list_all() if a.class_id in owned]


class InMemorySubmissions:
    def __init__(self):
        self.rows: dict[int, Submission] = {}

    def create(self, *, assignment_id, student_id, submitted_at, file_url) -> int:
        sid = len(self.rows) + 1
        self.rows[sid] = Submission(
            id=sid,
            assignment_id=assignment_id,
            student_id=student_id,
            submitted_at=submitted_at,
            file_url=file_url,
        )
        return sid

    def list_all(self):
        return sorted(self.rows.values(), key=lambda s: s.submitted_at, reverse=True)

    def list_for_student(self, student_id: int):
        return [s for s in self.list_all() if s.student_id == student_id]

    def list_for_assignment(self, assignment_id: int):
        return [s for s in self.list_all() if s.assignment_id == assignment_id]

    def set_grade(self, *, submission_id, grade) -> bool:
        current = self.rows.get(submission_id)
        if not current:
            return False
        self.rows[submission_id] = replace(current, grade=grade)
        return True


class InMemoryComments:
    def __init__(self):
        self.rows: list[Comment] = []

    def create(self, *, title, body, created_by) -> int:
        cid = len(self.rows) + 1
        self.rows.append(
            Comment(id=cid, title=title, body=body, created_by=created_by, created_at=datetime(2025, 1, 1, 9, cid))
        )
        return cid

    def list_recent(self):
        return sorted(self.rows, key=lambda c: c.created_at, reverse=True)


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 3, 10, 9, 0, 0)


@pytest.fixture
def repos():
    classes = InMemoryClasses()
    return SimpleNamespace(
        users=InMemoryUsers(),
        students=InMemoryStudents(),
        attendance=InMemoryAttendance(),
        classes=classes,
        lectures=InMemoryLectures(),
        assignments=InMemoryAssignments(classes),
        submissions=InMemorySubmissions(),
        comments=InMemoryComments(),
    )


@pytest.fixture
def tokens() -> TokenService:
    return TokenService(JWT_SECRET, ttl_hours=1)


@pytest.fixture
def container(repos, tokens):
    return wire_container(
        users_repo=repos.users,
        students_repo=repos.students,
        attendance_repo=repos.attendance,
        classes_repo=repos.classes,
        lectures_repo=repos.lectures,
        assignments_repo=repos.assignments,
        submissions_repo=repos.submissions,
        comments_repo=repos.comments,
        token_service=tokens,
    )


@pytest.fixture
def app(container):
    return create_app(
        {"SECRET_KEY": "test-secret", "TESTING": True, "DEBUG": False, "LOG_LEVEL": "WARNING"},
        container=container,
    )


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_user(repos):
    def _make(email: str, *, password: str = "secret1", role: Role = Role.STUDENT) -> User:
        uid = repos.users.create_user(email=email, password_hash=generate_password_hash(password), role=role)
        return repos.users.get_by_id(uid)

    return _make


@pytest.fixture
def auth_headers(make_user, tokens):
    """Headers for a freshly created account with ``role``."""

    counter = {"n": 0}

    def _headers(role: Role, *, user: Optional[User] = None) -> dict:
        if user is None:
            counter["n"] += 1
            user = make_user(f"{role.value}{counter['n']}@example.com", role=role)
        token = tokens.issue(user_id=user.id, email=user.email, role=user.role)
        return {"Authorization": f"Bearer {token}"}

    return _headers
