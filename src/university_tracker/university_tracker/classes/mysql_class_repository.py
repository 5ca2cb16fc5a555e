from __future__ import annotations

from datetime import date, time
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_time
from .model import ClassSession, Lecture
from .repository import ClassRepository, LectureRepository

_CLASS_COLUMNS = "id, course_name, faculty_id, schedule_day, start_time, end_time"


def _to_class(row: dict) -> ClassSession:
    return ClassSession(
        id=int(row["id"]),
        course_name=row["course_name"],
        faculty_id=int(row["faculty_id"]),
        schedule_day=row["schedule_day"],
        start_time=normalize_mysql_time(row["start_time"]),
        end_time=normalize_mysql_time(row["end_time"]),
    )


class MySQLClassRepository(ClassRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[ClassSession]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_CLASS_COLUMNS} FROM classes ORDER BY schedule_day, start_time")
            return [_to_class(r) for r in fetchall(cur)]

    def list_for_faculty(self, faculty_id: int) -> Sequence[ClassSession]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_CLASS_COLUMNS} FROM classes WHERE faculty_id=%s ORDER BY schedule_day, start_time",
                (faculty_id,),
            )
            return [_to_class(r) for r in fetchall(cur)]

    def get_by_id(self, class_id: int) -> Optional[ClassSession]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_CLASS_COLUMNS} FROM classes WHERE id=%s", (class_id,))
            row = fetchone(cur)
            return _to_class(row) if row else None

    def create(
        self,
        *,
        course_name: str,
        faculty_id: int,
        schedule_day: str,
        start_time: time,
        end_time: time,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO classes(course_name, faculty_id, schedule_day, start_time, end_time)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (course_name, faculty_id, schedule_day, start_time, end_time),
            )
            return int(cur.lastrowid)


class MySQLLectureRepository(LectureRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, *, class_id: int, topic: str, lecture_date: date) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO lectures(class_id, topic, lecture_date) VALUES(%s,%s,%s)",
                (class_id, topic, lecture_date),
            )
            return int(cur.lastrowid)

    def list_for_class(self, class_id: int) -> Sequence[Lecture]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, class_id, topic, lecture_date
                FROM lectures
                WHERE class_id=%s
                ORDER BY lecture_date DESC
                """,
                (class_id,),
            )
            return [
                Lecture(
                    id=int(r["id"]),
                    class_id=int(r["class_id"]),
                    topic=r["topic"],
                    lecture_date=r["lecture_date"],
                )
                for r in fetchall(cur)
            ]
