from dataclasses import dataclass

from ..models import Role, User


@dataclass(frozen=True)
class Identity:
    """Verified subject and authority attached to a request."""

    subject: str
    authority: Role = Role.USER


def identity_from_user(user: User) -> Identity:
    return Identity(subject=user.username, authority=Role(user.role))
