from __future__ import annotations

import importlib
import warnings
from datetime import datetime, timedelta, timezone

import pytest

from src.university_tracker.university_tracker.auth.tokens import TokenService
from src.university_tracker.university_tracker.core.enums import Role
from src.university_tracker.university_tracker.core.exceptions import AuthorizationError


def test_issue_then_verify_returns_identity(tokens):
    token = tokens.issue(user_id=7, email="f@x.com", role=Role.FACULTY)

    identity = tokens.verify(token)

    assert identity.user_id == 7
    assert identity.email == "f@x.com"
    assert identity.role == Role.FACULTY


def test_expired_token_is_rejected(tokens):
    issued = datetime.now(timezone.utc) - timedelta(hours=2)
    token = tokens.issue(user_id=1, email="a@x.com", role=Role.ADMIN, now=issued)

    with pytest.raises(AuthorizationError):
        tokens.verify(token)


def test_token_signed_with_other_secret_is_rejected(tokens):
    forged = TokenService("someone-else-entirely-0123456789abcdef").issue(user_id=1, email="a@x.com", role=Role.ADMIN)

    with pytest.raises(AuthorizationError):
        tokens.verify(forged)


@pytest.mark.parametrize("token", [None, "", "not-a-jwt"])
def test_missing_or_garbage_token_is_rejected(tokens, token):
    with pytest.raises(AuthorizationError):
        tokens.verify(token)


def test_configured_secrets_sign_without_warnings(tokens):
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        token = tokens.issue(user_id=1, email="a@x.com", role=Role.ADMIN)
        assert tokens.verify(token).user_id == 1


@pytest.mark.parametrize("module", ["config.development", "config.testing", "config.production"])
def test_default_jwt_secrets_are_long_enough_for_hs256(monkeypatch, module):
    monkeypatch.delenv("JWT_SECRET", raising=False)
    settings = importlib.reload(importlib.import_module(module))

    assert len(settings.JWT_SECRET.encode()) >= 32
