from __future__ import annotations

from datetime import date, timedelta

import pytest

from src.university_tracker.university_tracker.attendance.service import average_percentage, parse_trend_days
from src.university_tracker.university_tracker.core.enums import AttendanceStatus
from src.university_tracker.university_tracker.core.exceptions import NotFoundError, ValidationError


def test_marking_twice_same_day_keeps_latest(container, repos, fixed_now):
    sid = repos.students.create(name="A", email="a@x.com", enrollment_year=2025)
    today = fixed_now.date()

    container.attendance_service.mark(student_id=sid, status="Present", today=today)
    container.attendance_service.mark(student_id=sid, status="Absent", today=today)

    history = container.attendance_service.history(sid)
    assert len(history) == 1
    assert history[0].status == AttendanceStatus.ABSENT


def test_different_days_are_separate_rows(container, repos, fixed_now):
    sid = repos.students.create(name="A", email="a@x.com", enrollment_year=2025)
    today = fixed_now.date()

    container.attendance_service.mark(student_id=sid, status="Present", today=today - timedelta(days=1))
    container.attendance_service.mark(student_id=sid, status="Absent", today=today)

    history = container.attendance_service.history(sid)
    assert [r.date for r in history] == [today, today - timedelta(days=1)]


def test_mark_rejects_unknown_status(container, repos):
    sid = repos.students.create(name="A", email="a@x.com", enrollment_year=2025)

    with pytest.raises(ValidationError):
        container.attendance_service.mark(student_id=sid, status="Late")


def test_mark_requires_fields(container):
    with pytest.raises(ValidationError):
        container.attendance_service.mark(student_id=None, status="Present")


def test_mark_unknown_student(container):
    with pytest.raises(NotFoundError):
        container.attendance_service.mark(student_id=42, status="Present")


def test_stats_with_no_rows_has_zero_average(container):
    stats = container.attendance_service.stats()

    assert stats.total_attendance == 0
    assert stats.avg_percentage == 0


def test_stats_average_rounded_to_two_decimals(container, repos):
    day = date(2025, 3, 10)
    ids = [repos.students.create(name=n, email=f"{n}@x.com", enrollment_year=2025) for n in "abc"]
    container.attendance_service.mark(student_id=ids[0], status="Present", today=day)
    container.attendance_service.mark(student_id=ids[1], status="Absent", today=day)
    container.attendance_service.mark(student_id=ids[2], status="Absent", today=day)

    stats = container.attendance_service.stats()

    assert stats.to_dict() == {
        "totalStudents": 3,
        "totalAttendance": 3,
        "presentCount": 1,
        "avgPercentage": 33.33,
    }


@pytest.mark.parametrize(
    "present,total,expected",
    [(0, 0, 0), (1, 1, 100.0), (2, 3, 66.67), (1, 8, 12.5)],
)
def test_average_percentage(present, total, expected):
    assert average_percentage(present, total) == expected


@pytest.mark.parametrize("raw,expected", [(None, 30), ("7", 7), ("abc", 30), ("0", 30), ("-3", 30)])
def test_parse_trend_days(raw, expected):
    assert parse_trend_days(raw) == expected


def test_trends_only_cover_window(container, repos):
    today = date(2025, 3, 10)
    sid = repos.students.create(name="A", email="a@x.com", enrollment_year=2025)
    other = repos.students.create(name="B", email="b@x.com", enrollment_year=2025)
    container.attendance_service.mark(student_id=sid, status="Present", today=today - timedelta(days=40))
    container.attendance_service.mark(student_id=sid, status="Present", today=today - timedelta(days=2))
    container.attendance_service.mark(student_id=other, status="Absent", today=today - timedelta(days=2))

    points = container.attendance_service.trends(None, today=today)

    assert [(p.date, p.present, p.total) for p in points] == [(today - timedelta(days=2), 1, 2)]


def test_trends_window_past_year_one_starts_at_first_day(container, repos):
    sid = repos.students.create(name="A", email="a@x.com", enrollment_year=2025)
    container.attendance_service.mark(student_id=sid, status="Present", today=date(1, 1, 5))

    points = container.attendance_service.trends("1000000", today=date(2025, 3, 10))

    assert [p.date for p in points] == [date(1, 1, 5)]
