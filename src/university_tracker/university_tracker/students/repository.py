from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Student


class StudentRepository(Protocol):
    def list_all(self) -> Sequence[Student]:
        raise NotImplementedError

    def get_by_id(self, student_id: int) -> Optional[Student]:
        raise NotImplementedError

    def get_by_user_id(self, user_id: int) -> Optional[Student]:
        raise NotImplementedError

    def create(self, *, name: str, email: str, enrollment_year: int, user_id: Optional[int] = None) -> int:
        raise NotImplementedError

    def update(self, *, student_id: int, name: str, email: str, enrollment_year: int) -> bool:
        raise NotImplementedError

    def delete(self, *, student_id: int) -> bool:
        raise NotImplementedError

    def count(self) -> int:
        raise NotImplementedError
