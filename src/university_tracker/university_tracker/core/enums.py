from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Access tier of an account."""

    ADMIN = "admin"
    FACULTY = "faculty"
    STUDENT = "student"


class AttendanceStatus(str, Enum):
    """Attendance mark stored per (student, date)."""

    PRESENT = "Present"
    ABSENT = "Absent"
