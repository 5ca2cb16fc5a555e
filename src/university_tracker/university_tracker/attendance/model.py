from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one mark per (student, date)."""

    student_id: int
    date: date
    status: AttendanceStatus


@dataclass(frozen=True)
class AttendanceStats:
    total_students: int
    total_attendance: int
    present_count: int
    avg_percentage: float

    def to_dict(self) -> dict:
        return {
            "totalStudents": self.total_students,
            "totalAttendance": self.total_attendance,
            "presentCount": self.present_count,
            "avgPercentage": self.avg_percentage,
        }


@dataclass(frozen=True)
class TrendPoint:
    """Read-model: per-day present/total counts."""

    date: date
    present: int
    total: int
