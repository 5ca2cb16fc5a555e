from __future__ import annotations

import logging
from typing import Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_choice, require_non_empty
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, ConflictError
from ..users.repository import UserRepository
from .model import LoginResult
from .tokens import TokenService

logger = logging.getLogger(__name__)


class AuthService:
    """Use cases: register an account and log in."""

    def __init__(self, users: UserRepository, tokens: TokenService):
        self._users = users
        self._tokens = tokens

    def register(self, *, email: str, password: str, role: Optional[str] = None) -> int:
        email = require_non_empty(email, "email").lower()
        password = require_non_empty(password, "password")
        role_value = require_choice(role or Role.STUDENT.value, Role, "role")

        if self._users.get_by_email(email):
            raise ConflictError("Email already registered")

        user_id = self._users.create_user(
            email=email,
            password_hash=generate_password_hash(password),
            role=role_value,
        )
        logger.info("Registered user id=%s role=%s", user_id, role_value.value)
        return user_id

    def login(self, email: str, password: str) -> LoginResult:
        if not email or not password:
            raise AuthenticationError("Invalid credentials")

        user = self._users.get_by_email(str(email).strip().lower())
        if not user:
            logger.info("Login failed: unknown email")
            raise AuthenticationError("Invalid credentials")

        try:
            ok = check_password_hash(user.password_hash, password)
        except (TypeError, ValueError):
            # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
            ok = False

        if not ok:
            logger.info("Login failed: bad password for user id=%s", user.id)
            raise AuthenticationError("Invalid credentials")

        token = self._tokens.issue(user_id=user.id, email=user.email, role=user.role)
        return LoginResult(token=token, email=user.email, role=user.role)
