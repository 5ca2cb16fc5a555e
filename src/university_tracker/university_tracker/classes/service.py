from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..auth.model import Identity
from ..common.validators import require_date, require_fields, require_non_empty, require_positive_int, require_time
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from .model import ClassSession, Lecture
from .repository import ClassRepository, LectureRepository

STAFF_ROLES = (Role.FACULTY, Role.ADMIN)


def require_staff(current: Identity, action: str) -> None:
    if not current.has_role(*STAFF_ROLES):
        raise AuthorizationError(f"Only faculty or admin can {action}")


def require_managed_class(classes: ClassRepository, current: Identity, class_id: Any) -> ClassSession:
    """Load a class the caller may add content to.

    Admin may manage any class; faculty only the classes they own.
    """
    klass = classes.get_by_id(require_positive_int(class_id, "class_id"))
    if not klass:
        raise NotFoundError("Class not found")
    if current.role == Role.FACULTY and klass.faculty_id != current.user_id:
        raise AuthorizationError("Class belongs to another faculty member")
    return klass


class ClassService:
    """Use cases: schedule classes and record lectures."""

    def __init__(self, classes: ClassRepository, lectures: LectureRepository):
        self._classes = classes
        self._lectures = lectures

    def list_classes(self) -> Sequence[ClassSession]:
        return self._classes.list_all()

    def list_for_faculty(self, faculty_id: int) -> Sequence[ClassSession]:
        return self._classes.list_for_faculty(int(faculty_id))

    def create_class(self, *, current: Identity, data: Mapping[str, Any]) -> ClassSession:
        require_staff(current, "create classes")
        require_fields(data, ("course_name", "schedule_day", "start_time", "end_time"))

        course_name = require_non_empty(data.get("course_name"), "course_name")
        schedule_day = require_non_empty(data.get("schedule_day"), "schedule_day")
        start_time = require_time(data.get("start_time"), "start_time")
        end_time = require_time(data.get("end_time"), "end_time")
        if end_time <= start_time:
            raise ValidationError("end_time must be after start_time")

        class_id = self._classes.create(
            course_name=course_name,
            faculty_id=current.user_id,
            schedule_day=schedule_day,
            start_time=start_time,
            end_time=end_time,
        )
        return ClassSession(
            id=class_id,
            course_name=course_name,
            faculty_id=current.user_id,
            schedule_day=schedule_day,
            start_time=start_time,
            end_time=end_time,
        )

    def create_lecture(self, *, current: Identity, data: Mapping[str, Any]) -> Lecture:
        require_staff(current, "create lectures")
        require_fields(data, ("class_id", "topic", "lecture_date"))

        klass = require_managed_class(self._classes, current, data.get("class_id"))
        topic = require_non_empty(data.get("topic"), "topic")
        lecture_date = require_date(data.get("lecture_date"), "lecture_date")

        lecture_id = self._lectures.create(class_id=klass.id, topic=topic, lecture_date=lecture_date)
        return Lecture(id=lecture_id, class_id=klass.id, topic=topic, lecture_date=lecture_date)

    def list_lectures(self, class_id: int) -> Sequence[Lecture]:
        return self._lectures.list_for_class(int(class_id))
