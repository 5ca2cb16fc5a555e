from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Comment
from .repository import CommentRepository


class MySQLCommentRepository(CommentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, *, title: str, body: str, created_by: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO comments(title, body, created_by) VALUES(%s,%s,%s)",
                (title, body, created_by),
            )
            return int(cur.lastrowid)

    def list_recent(self) -> Sequence[Comment]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, title, body, created_by, created_at
                FROM comments
                ORDER BY created_at DESC, id DESC
                """
            )
            return [
                Comment(
                    id=int(r["id"]),
                    title=r["title"],
                    body=r["body"],
                    created_by=r["created_by"],
                    created_at=r.get("created_at"),
                )
                for r in fetchall(cur)
            ]
