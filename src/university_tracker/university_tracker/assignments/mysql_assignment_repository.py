from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Assignment, Submission
from .repository import AssignmentRepository, SubmissionRepository


def _to_assignment(row: dict) -> Assignment:
    return Assignment(
        id=int(row["id"]),
        class_id=int(row["class_id"]),
        title=row["title"],
        description=row.get("description"),
        due_date=row["due_date"],
        course_name=row.get("course_name"),
    )


def _to_submission(row: dict) -> Submission:
    return Submission(
        id=int(row["id"]),
        assignment_id=int(row["assignment_id"]),
        student_id=int(row["student_id"]),
        submitted_at=row["submitted_at"],
        file_url=row["file_url"],
        grade=row.get("grade"),
    )


class MySQLAssignmentRepository(AssignmentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, *, class_id: int, title: str, description: Optional[str], due_date: date) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO assignments(class_id, title, description, due_date) VALUES(%s,%s,%s,%s)",
                (class_id, title, description, due_date),
            )
            return int(cur.lastrowid)

    def get_by_id(self, assignment_id: int) -> Optional[Assignment]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT a.id, a.class_id, a.title, a.description, a.due_date, c.course_name
                FROM assignments a
                JOIN classes c ON c.id = a.class_id
                WHERE a.id=%s
                """,
                (assignment_id,),
            )
            row = fetchone(cur)
            return _to_assignment(row) if row else None

    def list_all(self) -> Sequence[Assignment]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT a.id, a.class_id, a.title, a.description, a.due_date, c.course_name
                FROM assignments a
                JOIN classes c ON a.class_id = c.id
                ORDER BY a.due_date ASC
                """
            )
            return [_to_assignment(r) for r in fetchall(cur)]

    def list_for_class(self, class_id: int) -> Sequence[Assignment]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, class_id, title, description, due_date
                FROM assignments
                WHERE class_id=%s
                ORDER BY due_date ASC
                """,
                (class_id,),
            )
            return [_to_assignment(r) for r in fetchall(cur)]

    def list_for_faculty(self, faculty_id: int) -> Sequence[Assignment]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT a.id, a.class_id, a.title, a.description, a.due_date, c.course_name
                FROM assignments a
                JOIN classes c ON a.class_id = c.id
                WHERE c.faculty_id=%s
                ORDER BY a.due_date ASC
                """,
                (faculty_id,),
            )
            return [_to_assignment(r) for r in fetchall(cur)]


class MySQLSubmissionRepository(SubmissionRepository):
    _SELECT = "SELECT id, assignment_id, student_id, submitted_at, file_url, grade FROM submissions"

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, *, assignment_id: int, student_id: int, submitted_at: datetime, file_url: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO submissions(assignment_id, student_id, submitted_at, file_url)
                VALUES(%s,%s,%s,%s)
                """,
                (assignment_id, student_id, submitted_at, file_url),
            )
            return int(cur.lastrowid)

    def list_all(self) -> Sequence[Submission]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{self._SELECT} ORDER BY submitted_at DESC")
            return [_to_submission(r) for r in fetchall(cur)]

    def list_for_student(self, student_id: int) -> Sequence[Submission]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{self._SELECT} WHERE student_id=%s ORDER BY submitted_at DESC", (student_id,))
            return [_to_submission(r) for r in fetchall(cur)]

    def list_for_assignment(self, assignment_id: int) -> Sequence[Submission]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{self._SELECT} WHERE assignment_id=%s ORDER BY submitted_at DESC", (assignment_id,))
            return [_to_submission(r) for r in fetchall(cur)]

    def set_grade(self, *, submission_id: int, grade: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE submissions SET grade=%s WHERE id=%s", (grade, submission_id))
            return cur.rowcount > 0
