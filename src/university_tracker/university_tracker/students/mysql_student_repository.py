from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetch_count, fetchall, fetchone
from .model import Student
from .repository import StudentRepository

_COLUMNS = "id, name, email, enrollment_year, user_id"


def _to_student(row: dict) -> Student:
    return Student(
        id=int(row["id"]),
        name=row["name"],
        email=row["email"],
        enrollment_year=int(row["enrollment_year"]),
        user_id=int(row["user_id"]) if row.get("user_id") is not None else None,
    )


class MySQLStudentRepository(StudentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM students ORDER BY id DESC")
            return [_to_student(r) for r in fetchall(cur)]

    def get_by_id(self, student_id: int) -> Optional[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM students WHERE id=%s", (student_id,))
            row = fetchone(cur)
            return _to_student(row) if row else None

    def get_by_user_id(self, user_id: int) -> Optional[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM students WHERE user_id=%s", (user_id,))
            row = fetchone(cur)
            return _to_student(row) if row else None

    def create(self, *, name: str, email: str, enrollment_year: int, user_id: Optional[int] = None) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO students(name, email, enrollment_year, user_id) VALUES(%s,%s,%s,%s)",
                (name, email, enrollment_year, user_id),
            )
            return int(cur.lastrowid)

    def update(self, *, student_id: int, name: str, email: str, enrollment_year: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE students SET name=%s, email=%s, enrollment_year=%s WHERE id=%s",
                (name, email, enrollment_year, student_id),
            )
            return cur.rowcount > 0

    def delete(self, *, student_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM students WHERE id=%s", (student_id,))
            return cur.rowcount > 0

    def count(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            return fetch_count(cur, "SELECT COUNT(*) AS total FROM students")
