from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional


@dataclass(frozen=True)
class Assignment:
    id: int
    class_id: int
    title: str
    description: Optional[str]
    due_date: date
    # Filled by queries joined to classes.
    course_name: Optional[str] = None


@dataclass(frozen=True)
class Submission:
    id: int
    assignment_id: int
    student_id: int
    submitted_at: datetime
    file_url: str
    grade: Optional[str] = None
