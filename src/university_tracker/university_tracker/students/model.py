from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Student:
    """Domain entity: a student record, optionally linked to a login account."""

    id: int
    name: str
    email: str
    enrollment_year: int
    user_id: Optional[int] = None
