from __future__ import annotations

from functools import wraps
from typing import Optional

from flask import request

from ..core.enums import Role
from ..core.exceptions import AuthorizationError
from .model import Identity
from .tokens import TokenService


def bearer_token() -> Optional[str]:
    """Token from an ``Authorization: Bearer <token>`` header, if any."""
    header = request.headers.get("Authorization", "")
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


class Guards:
    """Route decorators for bearer-token auth.

    Guarded views receive the caller's Identity as their first argument.
    Failures raise AuthorizationError, rendered as 403 by the app.
    """

    def __init__(self, tokens: TokenService):
        self._tokens = tokens

    def current_identity(self) -> Identity:
        return self._tokens.verify(bearer_token())

    def token_required(self, view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            return view(self.current_identity(), *args, **kwargs)

        return wrapper

    def roles_required(self, *roles: Role):
        allowed = ", ".join(r.value for r in roles)

        def decorator(view):
            @wraps(view)
            def wrapper(*args, **kwargs):
                identity = self.current_identity()
                if not identity.has_role(*roles):
                    raise AuthorizationError(f"Only {allowed} allowed")
                return view(identity, *args, **kwargs)

            return wrapper

        return decorator
