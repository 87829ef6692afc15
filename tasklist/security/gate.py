import logging

from ..exceptions import InvalidCredentialsError
from ..repositories import UserRepository
from .identity import Identity, identity_from_user
from .passwords import PasswordHasher

logger = logging.getLogger(__name__)


class AuthenticationGate:
    """Verifies a username and password against the credential store.

    Unknown usernames and wrong passwords fail identically: same exception,
    same message, and a bcrypt comparison in both cases so response times
    do not reveal which usernames exist.
    """

    def __init__(self, users: UserRepository, hasher: PasswordHasher):
        self._users = users
        self._hasher = hasher

    def authenticate(self, username: str, plaintext: str) -> Identity:
        user = self._users.find_by_username(username)
        if user is None:
            self._hasher.verify(plaintext, self._hasher.dummy_hash)
            logger.info("Login failed for username: %s", username)
            raise InvalidCredentialsError()

        if not self._hasher.verify(plaintext, user.password):
            logger.info("Login failed for username: %s", username)
            raise InvalidCredentialsError()

        logger.info("User logged in: %s", username)
        return identity_from_user(user)
