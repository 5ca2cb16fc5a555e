from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping, Optional, Sequence

from ..auth.model import Identity
from ..classes.repository import ClassRepository
from ..classes.service import require_managed_class, require_staff
from ..common.datetime_utils import now_local
from ..common.validators import require_date, require_fields, require_non_empty, require_positive_int
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, NotFoundError
from ..students.repository import StudentRepository
from .model import Assignment, Submission
from .repository import AssignmentRepository, SubmissionRepository


class AssignmentService:
    """Use cases: publish assignments, submit work and grade it."""

    def __init__(
        self,
        assignments: AssignmentRepository,
        submissions: SubmissionRepository,
        classes: ClassRepository,
        students: StudentRepository,
    ):
        self._assignments = assignments
        self._submissions = submissions
        self._classes = classes
        self._students = students

    def create_assignment(self, *, current: Identity, data: Mapping[str, Any]) -> Assignment:
        require_staff(current, "create assignments")
        require_fields(data, ("class_id", "title", "due_date"))

        klass = require_managed_class(self._classes, current, data.get("class_id"))
        title = require_non_empty(data.get("title"), "title")
        description = (str(data.get("description") or "").strip()) or None
        due_date = require_date(data.get("due_date"), "due_date")

        assignment_id = self._assignments.create(
            class_id=klass.id,
            title=title,
            description=description,
            due_date=due_date,
        )
        return Assignment(
            id=assignment_id,
            class_id=klass.id,
            title=title,
            description=description,
            due_date=due_date,
            course_name=klass.course_name,
        )

    def list_assignments(self, *, current: Identity, class_id: Any = None) -> Sequence[Assignment]:
        if class_id not in (None, ""):
            return self._assignments.list_for_class(require_positive_int(class_id, "class_id"))
        if current.role == Role.FACULTY:
            return self._assignments.list_for_faculty(current.user_id)
        return self._assignments.list_all()

    def list_for_class(self, class_id: int) -> Sequence[Assignment]:
        return self._assignments.list_for_class(int(class_id))

    def list_for_faculty(self, faculty_id: int) -> Sequence[Assignment]:
        return self._assignments.list_for_faculty(int(faculty_id))

    def submit(self, *, current: Identity, data: Mapping[str, Any], now: Optional[datetime] = None) -> Submission:
        if current.role != Role.STUDENT:
            raise AuthorizationError("Only students can submit assignments")
        require_fields(data, ("assignment_id", "file_url"))

        assignment_id = require_positive_int(data.get("assignment_id"), "assignment_id")
        file_url = require_non_empty(data.get("file_url"), "file_url")

        student = self._students.get_by_user_id(current.user_id)
        if not student:
            raise NotFoundError("Student not found")
        if not self._assignments.get_by_id(assignment_id):
            raise NotFoundError("Assignment not found")

        submitted_at = now or now_local()
        submission_id = self._submissions.create(
            assignment_id=assignment_id,
            student_id=student.id,
            submitted_at=submitted_at,
            file_url=file_url,
        )
        return Submission(
            id=submission_id,
            assignment_id=assignment_id,
            student_id=student.id,
            submitted_at=submitted_at,
            file_url=file_url,
        )

    def list_submissions(self, *, current: Identity, assignment_id: Any = None) -> Sequence[Submission]:
        """Students see their own work; faculty/admin see everything or one assignment."""
        if current.role == Role.STUDENT:
            student = self._students.get_by_user_id(current.user_id)
            if not student:
                raise NotFoundError("Student not found")
            return self._submissions.list_for_student(student.id)

        if assignment_id not in (None, ""):
            return self._submissions.list_for_assignment(require_positive_int(assignment_id, "assignment_id"))
        return self._submissions.list_all()

    def list_for_student(self, student_id: int) -> Sequence[Submission]:
        return self._submissions.list_for_student(int(student_id))

    def grade(self, *, current: Identity, submission_id: int, data: Mapping[str, Any]) -> None:
        require_staff(current, "grade")
        require_fields(data, ("grade",))
        grade = require_non_empty(data.get("grade"), "grade")
        self._submissions.set_grade(submission_id=int(submission_id), grade=grade)
