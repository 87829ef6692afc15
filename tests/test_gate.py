from unittest.mock import Mock, call, patch

import pytest
from sqlalchemy.exc import OperationalError

from tasklist.exceptions import InvalidCredentialsError
from tasklist.models import Role, User
from tasklist.repositories import UserRepository
from tasklist.security import AuthenticationGate, Identity, identity_from_user


@pytest.fixture
def users(db_session):
    return UserRepository(db_session)


@pytest.fixture
def gate(users, hasher):
    return AuthenticationGate(users, hasher)


@pytest.fixture
def alice(users, hasher):
    return users.save(User(username="alice", password=hasher.hash_password("correct-horse")))


def test_correct_password_yields_identity(gate, alice):
    identity = gate.authenticate("alice", "correct-horse")
    assert identity == Identity(subject="alice", authority=Role.USER)


def test_wrong_password_is_rejected(gate, alice):
    with pytest.raises(InvalidCredentialsError):
        gate.authenticate("alice", "wrong")


def test_unknown_user_fails_like_wrong_password(gate, alice):
    with pytest.raises(InvalidCredentialsError) as ghost:
        gate.authenticate("ghost", "anything")
    with pytest.raises(InvalidCredentialsError) as wrong:
        gate.authenticate("alice", "wrong_password")

    assert type(ghost.value) is type(wrong.value)
    assert ghost.value.message == wrong.value.message
    assert ghost.value.code == wrong.value.code


def test_unknown_user_still_runs_a_hash_comparison(gate, hasher):
    with patch.object(hasher, "verify", wraps=hasher.verify) as spy:
        with pytest.raises(InvalidCredentialsError):
            gate.authenticate("ghost", "anything")
    assert spy.call_args_list == [call("anything", hasher.dummy_hash)]


def test_username_match_is_case_sensitive(gate, alice):
    with pytest.raises(InvalidCredentialsError):
        gate.authenticate("Alice", "correct-horse")


def test_corrupted_stored_hash_is_invalid_credentials(gate, users):
    users.save(User(username="broken", password="not-a-bcrypt-hash"))
    with pytest.raises(InvalidCredentialsError):
        gate.authenticate("broken", "not-a-bcrypt-hash")


def test_store_failure_is_not_an_authentication_failure(hasher):
    users = Mock(spec=UserRepository)
    users.find_by_username.side_effect = OperationalError("SELECT", {}, Exception("connection lost"))
    gate = AuthenticationGate(users, hasher)

    with pytest.raises(OperationalError):
        gate.authenticate("alice", "correct-horse")


def test_identity_from_user():
    user = User(id=7, username="bob", password="$2b$04$hash", role=Role.USER)
    assert identity_from_user(user) == Identity(subject="bob", authority=Role.USER)
