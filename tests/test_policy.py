from datetime import timedelta

import pytest
from jose import jwt

from tasklist.models import Role
from tasklist.security import Decision, Identity, evaluate, is_public_path
from tasklist.security.tokens import ALGORITHM, create_access_token, decode_access_token

PUBLIC = ("/api/auth/", "/health")
ALICE = Identity(subject="alice", authority=Role.USER)


@pytest.mark.parametrize(
    "path",
    ["/api/auth", "/api/auth/", "/api/auth/signup", "/api/auth/login", "/health"],
)
def test_public_paths(path):
    assert is_public_path(path, PUBLIC)


@pytest.mark.parametrize(
    "path",
    ["/api/tasks", "/api/tasks/1", "/api/authors", "/healthz", "/", "/api"],
)
def test_protected_paths(path):
    assert not is_public_path(path, PUBLIC)


def test_public_path_allowed_in_either_state():
    assert evaluate("/api/auth/signup", None, PUBLIC) is Decision.ALLOW
    assert evaluate("/api/auth/signup", ALICE, PUBLIC) is Decision.ALLOW


def test_protected_path_requires_identity():
    assert evaluate("/api/tasks", None, PUBLIC) is Decision.REJECT
    assert evaluate("/api/tasks", ALICE, PUBLIC) is Decision.ALLOW


def test_empty_allowlist_protects_everything():
    assert evaluate("/api/auth/login", None, ()) is Decision.REJECT


def test_token_round_trip():
    token = create_access_token(ALICE)
    assert decode_access_token(token) == ALICE


def test_expired_token_is_rejected():
    token = create_access_token(ALICE, expires_delta=timedelta(seconds=-10))
    assert decode_access_token(token) is None


@pytest.mark.parametrize("token", ["", "garbage", "a.b.c"])
def test_garbled_token_is_rejected(token):
    assert decode_access_token(token) is None


def test_token_signed_with_another_key_is_rejected():
    token = jwt.encode({"sub": "alice", "role": "USER"}, "someone-elses-key", algorithm=ALGORITHM)
    assert decode_access_token(token) is None


def test_token_without_subject_is_rejected():
    token = jwt.encode({"role": "USER"}, "test-secret-key", algorithm=ALGORITHM)
    assert decode_access_token(token) is None


def test_token_with_unknown_role_is_rejected():
    token = jwt.encode({"sub": "alice", "role": "ADMIN"}, "test-secret-key", algorithm=ALGORITHM)
    assert decode_access_token(token) is None
