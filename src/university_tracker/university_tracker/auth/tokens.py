from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from ..core.constants import DEFAULT_TOKEN_TTL_HOURS, JWT_ALGORITHM
from ..core.enums import Role
from ..core.exceptions import AuthorizationError
from .model import Identity


class TokenService:
    """Issue and verify signed, time-limited bearer tokens."""

    def __init__(self, secret: str, *, ttl_hours: int = DEFAULT_TOKEN_TTL_HOURS, algorithm: str = JWT_ALGORITHM):
        self._secret = secret
        self._ttl = timedelta(hours=int(ttl_hours))
        self._algorithm = algorithm

    def issue(self, *, user_id: int, email: str, role: Role, now: Optional[datetime] = None) -> str:
        """Create a token carrying id, email and role plus iat/exp."""
        now = now or datetime.now(timezone.utc)
        payload = {
            "id": int(user_id),
            "email": email,
            "role": role.value,
            "iat": int(now.timestamp()),
            "exp": int((now + self._ttl).timestamp()),
        }
        # pyjwt returns str in v2+
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: Optional[str]) -> Identity:
        """Return the identity inside ``token``.

        Raises AuthorizationError when the token is missing, tampered with,
        expired or carries an unknown role.
        """
        if not token:
            raise AuthorizationError("Token missing")

        try:
            payload = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except jwt.ExpiredSignatureError:
            raise AuthorizationError("Token expired")
        except jwt.InvalidTokenError:
            raise AuthorizationError("Invalid token")

        try:
            return Identity(
                user_id=int(payload["id"]),
                email=str(payload.get("email") or ""),
                role=Role(payload["role"]),
            )
        except (KeyError, TypeError, ValueError):
            raise AuthorizationError("Invalid token")
