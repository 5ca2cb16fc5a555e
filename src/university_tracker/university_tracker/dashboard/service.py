from __future__ import annotations

from ..assignments.repository import AssignmentRepository, SubmissionRepository
from ..attendance.repository import AttendanceRepository
from ..auth.model import Identity
from ..classes.repository import ClassRepository
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, NotFoundError
from ..students.repository import StudentRepository


class DashboardService:
    """Role-specific summary for the signed-in caller.

    Faculty get their classes and the assignments of those classes; students get
    their own attendance and submissions. Other roles have no dashboard.
    """

    def __init__(
        self,
        classes: ClassRepository,
        assignments: AssignmentRepository,
        students: StudentRepository,
        attendance: AttendanceRepository,
        submissions: SubmissionRepository,
    ):
        self._classes = classes
        self._assignments = assignments
        self._students = students
        self._attendance = attendance
        self._submissions = submissions

    def summary_for(self, current: Identity) -> dict:
        if current.role == Role.FACULTY:
            return {
                "classes": list(self._classes.list_for_faculty(current.user_id)),
                "assignments": list(self._assignments.list_for_faculty(current.user_id)),
            }

        if current.role == Role.STUDENT:
            student = self._students.get_by_user_id(current.user_id)
            if not student:
                raise NotFoundError("Student not found")
            return {
                "attendance": list(self._attendance.list_for_student(student.id)),
                "submissions": list(self._submissions.list_for_student(student.id)),
            }

        raise AuthorizationError("Dashboard not available for this role")
