from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord, TrendPoint


class AttendanceRepository(Protocol):
    def upsert(self, *, student_id: int, day: date, status: AttendanceStatus) -> None:
        """Insert the mark or overwrite the status of the existing (student, day) row."""

        raise NotImplementedError

    def list_for_student(self, student_id: int) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def count_all(self) -> int:
        raise NotImplementedError

    def count_by_status(self, status: AttendanceStatus) -> int:
        raise NotImplementedError

    def daily_counts(self, *, since: date) -> Sequence[TrendPoint]:
        raise NotImplementedError
