from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..common.validators import require_fields, require_non_empty, require_positive_int
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from .model import Student
from .repository import StudentRepository


class StudentService:
    """Use case: manage student records (mutations are admin only)."""

    def __init__(self, students: StudentRepository):
        self._students = students

    @staticmethod
    def _require_admin(current_role: Role) -> None:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Admin only")

    @staticmethod
    def _clean(data: Mapping[str, Any]) -> tuple[str, str, int]:
        require_fields(data, ("name", "email", "enrollment_year"))
        name = require_non_empty(data.get("name"), "name")
        email = require_non_empty(data.get("email"), "email")
        if "@" not in email:
            raise ValidationError("email is not valid")
        enrollment_year = require_positive_int(data.get("enrollment_year"), "enrollment_year")
        return name, email, enrollment_year

    def list_students(self) -> Sequence[Student]:
        return self._students.list_all()

    def get_student(self, student_id: int) -> Student:
        student = self._students.get_by_id(int(student_id))
        if not student:
            raise NotFoundError("Student not found")
        return student

    def create_student(self, *, current_role: Role, data: Mapping[str, Any]) -> Student:
        self._require_admin(current_role)
        name, email, enrollment_year = self._clean(data)

        user_id = data.get("user_id")
        user_id = require_positive_int(user_id, "user_id") if user_id not in (None, "") else None

        student_id = self._students.create(name=name, email=email, enrollment_year=enrollment_year, user_id=user_id)
        return Student(id=student_id, name=name, email=email, enrollment_year=enrollment_year, user_id=user_id)

    def update_student(self, *, current_role: Role, student_id: int, data: Mapping[str, Any]) -> None:
        self._require_admin(current_role)
        name, email, enrollment_year = self._clean(data)
        self._students.update(student_id=int(student_id), name=name, email=email, enrollment_year=enrollment_year)

    def delete_student(self, *, current_role: Role, student_id: int) -> None:
        self._require_admin(current_role)
        self._students.delete(student_id=int(student_id))
