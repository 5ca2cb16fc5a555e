from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from .model import Assignment, Submission


class AssignmentRepository(Protocol):
    def create(self, *, class_id: int, title: str, description: Optional[str], due_date: date) -> int:
        raise NotImplementedError

    def get_by_id(self, assignment_id: int) -> Optional[Assignment]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Assignment]:
        raise NotImplementedError

    def list_for_class(self, class_id: int) -> Sequence[Assignment]:
        raise NotImplementedError

    def list_for_faculty(self, faculty_id: int) -> Sequence[Assignment]:
        """Assignments of every class the faculty owns, with course_name."""

        raise NotImplementedError


class SubmissionRepository(Protocol):
    def create(self, *, assignment_id: int, student_id: int, submitted_at: datetime, file_url: str) -> int:
        raise NotImplementedError

    def list_all(self) -> Sequence[Submission]:
        raise NotImplementedError

    def list_for_student(self, student_id: int) -> Sequence[Submission]:
        raise NotImplementedError

    def list_for_assignment(self, assignment_id: int) -> Sequence[Submission]:
        raise NotImplementedError

    def set_grade(self, *, submission_id: int, grade: str) -> bool:
        raise NotImplementedError
