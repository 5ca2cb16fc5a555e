from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class Identity:
    """Caller identity decoded from a bearer token.

    Passed explicitly into views and services instead of living on the request.
    """

    user_id: int
    email: str
    role: Role

    def has_role(self, *roles: Role) -> bool:
        return self.role in roles


@dataclass(frozen=True)
class LoginResult:
    token: str
    email: str
    role: Role
