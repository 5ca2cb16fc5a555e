from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: a login account.

    Note: plain data object, no DB access here.
    """

    id: int
    email: str
    password_hash: str
    role: Role
