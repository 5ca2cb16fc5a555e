from __future__ import annotations

from datetime import date
from typing import Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetch_count, fetchall
from .model import AttendanceRecord, TrendPoint
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def upsert(self, *, student_id: int, day: date, status: AttendanceStatus) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance(student_id, date, status)
                VALUES(%s,%s,%s)
                ON DUPLICATE KEY UPDATE status=VALUES(status)
                """,
                (student_id, day, status.value),
            )

    def list_for_student(self, student_id: int) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT student_id, date, status
                FROM attendance
                WHERE student_id=%s
                ORDER BY date DESC
                """,
                (student_id,),
            )
            return [
                AttendanceRecord(
                    student_id=int(r["student_id"]),
                    date=r["date"],
                    status=AttendanceStatus(r["status"]),
                )
                for r in fetchall(cur)
            ]

    def count_all(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            return fetch_count(cur, "SELECT COUNT(*) AS total FROM attendance")

    def count_by_status(self, status: AttendanceStatus) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            return fetch_count(cur, "SELECT COUNT(*) AS total FROM attendance WHERE status=%s", (status.value,))

    def daily_counts(self, *, since: date) -> Sequence[TrendPoint]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT date,
                       SUM(status='Present') AS present,
                       COUNT(*) AS total
                FROM attendance
                WHERE date >= %s
                GROUP BY date
                ORDER BY date ASC
                """,
                (since,),
            )
            return [
                TrendPoint(date=r["date"], present=int(r["present"] or 0), total=int(r["total"] or 0))
                for r in fetchall(cur)
            ]
