from __future__ import annotations

from datetime import date, timedelta
from typing import Any, Optional, Sequence

from ..common.datetime_utils import today_local
from ..common.validators import require_choice, require_positive_int
from ..core.constants import DEFAULT_TREND_DAYS
from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..students.repository import StudentRepository
from .model import AttendanceRecord, AttendanceStats, TrendPoint
from .repository import AttendanceRepository


def average_percentage(present: int, total: int) -> float:
    """Present share of ``total`` as a percentage, 0 when there are no rows."""
    if total == 0:
        return 0
    return round(present / total * 100, 2)


def parse_trend_days(value: Any) -> int:
    try:
        days = int(value)
    except (TypeError, ValueError):
        return DEFAULT_TREND_DAYS
    return days if days > 0 else DEFAULT_TREND_DAYS


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository, students: StudentRepository):
        self._attendance = attendance
        self._students = students

    def mark(self, *, student_id: Any, status: Any, today: Optional[date] = None) -> AttendanceRecord:
        if student_id in (None, "") or status in (None, ""):
            raise ValidationError("Missing fields")

        sid = require_positive_int(student_id, "student_id")
        mark = require_choice(status, AttendanceStatus, "status")
        if not self._students.get_by_id(sid):
            raise NotFoundError("Student not found")

        day = today or today_local()
        self._attendance.upsert(student_id=sid, day=day, status=mark)
        return AttendanceRecord(student_id=sid, date=day, status=mark)

    def history(self, student_id: int) -> Sequence[AttendanceRecord]:
        return self._attendance.list_for_student(int(student_id))

    def stats(self) -> AttendanceStats:
        total_students = self._students.count()
        total_attendance = self._attendance.count_all()
        present = self._attendance.count_by_status(AttendanceStatus.PRESENT)
        return AttendanceStats(
            total_students=total_students,
            total_attendance=total_attendance,
            present_count=present,
            avg_percentage=average_percentage(present, total_attendance),
        )

    def trends(self, days: Any = None, *, today: Optional[date] = None) -> Sequence[TrendPoint]:
        window = parse_trend_days(days)
        end = today or today_local()
        # Windows reaching past year 1 cover every stored day.
        since = date.min if window >= (end - date.min).days else end - timedelta(days=window)
        return self._attendance.daily_counts(since=since)
