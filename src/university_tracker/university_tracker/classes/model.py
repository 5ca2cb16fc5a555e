from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time


@dataclass(frozen=True)
class ClassSession:
    """Domain entity: a weekly class slot owned by a faculty user."""

    id: int
    course_name: str
    faculty_id: int
    schedule_day: str
    start_time: time
    end_time: time


@dataclass(frozen=True)
class Lecture:
    id: int
    class_id: int
    topic: str
    lecture_date: date
