from __future__ import annotations

from typing import Protocol, Sequence

from .model import Comment


class CommentRepository(Protocol):
    def create(self, *, title: str, body: str, created_by: str) -> int:
        raise NotImplementedError

    def list_recent(self) -> Sequence[Comment]:
        raise NotImplementedError
