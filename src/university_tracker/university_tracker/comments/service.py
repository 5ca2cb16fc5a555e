from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..auth.model import Identity
from ..common.validators import require_fields, require_non_empty
from .model import Comment
from .repository import CommentRepository


class CommentService:
    def __init__(self, comments: CommentRepository):
        self._comments = comments

    def post(self, *, current: Identity, data: Mapping[str, Any]) -> Comment:
        require_fields(data, ("title", "body"))
        title = require_non_empty(data.get("title"), "title")
        body = require_non_empty(data.get("body"), "body")
        created_by = current.email or str(current.user_id)

        comment_id = self._comments.create(title=title, body=body, created_by=created_by)
        return Comment(id=comment_id, title=title, body=body, created_by=created_by)

    def list_recent(self) -> Sequence[Comment]:
        return self._comments.list_recent()
