"""FastAPI dependencies wiring repositories and the authentication gate."""

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from .config import BCRYPT_ROUNDS
from .database import get_db
from .exceptions import UnauthorizedError
from .models import User
from .repositories import TaskRepository, UserRepository
from .security import AuthenticationGate, Identity, PasswordHasher

password_hasher = PasswordHasher(rounds=BCRYPT_ROUNDS)


def get_password_hasher() -> PasswordHasher:
    return password_hasher


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    return UserRepository(db)


def get_task_repository(db: Session = Depends(get_db)) -> TaskRepository:
    return TaskRepository(db)


def get_auth_gate(
    users: UserRepository = Depends(get_user_repository),
    hasher: PasswordHasher = Depends(get_password_hasher),
) -> AuthenticationGate:
    return AuthenticationGate(users, hasher)


def get_current_identity(request: Request) -> Identity:
    """Identity established by the authentication middleware."""
    identity = getattr(request.state, "identity", None)
    if identity is None:
        raise UnauthorizedError()
    return identity


def get_current_user(
    identity: Identity = Depends(get_current_identity),
    users: UserRepository = Depends(get_user_repository),
) -> User:
    """Load the user record behind the current identity.

    A valid token for a user that no longer exists is treated as no
    credential at all.
    """
    user = users.find_by_username(identity.subject)
    if user is None:
        raise UnauthorizedError("Could not validate credentials")
    return user
