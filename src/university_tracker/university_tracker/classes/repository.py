from __future__ import annotations

from datetime import date, time
from typing import Optional, Protocol, Sequence

from .model import ClassSession, Lecture


class ClassRepository(Protocol):
    def list_all(self) -> Sequence[ClassSession]:
        raise NotImplementedError

    def list_for_faculty(self, faculty_id: int) -> Sequence[ClassSession]:
        raise NotImplementedError

    def get_by_id(self, class_id: int) -> Optional[ClassSession]:
        raise NotImplementedError

    def create(
        self,
        *,
        course_name: str,
        faculty_id: int,
        schedule_day: str,
        start_time: time,
        end_time: time,
    ) -> int:
        raise NotImplementedError


class LectureRepository(Protocol):
    def create(self, *, class_id: int, topic: str, lecture_date: date) -> int:
        raise NotImplementedError

    def list_for_class(self, class_id: int) -> Sequence[Lecture]:
        raise NotImplementedError
