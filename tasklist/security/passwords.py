import logging
from functools import cached_property

import bcrypt

from ..exceptions import MalformedHashError

logger = logging.getLogger(__name__)

# bcrypt only looks at the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72


def _password_bytes(plaintext: str) -> bytes:
    return plaintext.encode("utf-8")[:BCRYPT_MAX_BYTES]


def _hash_bytes(stored_hash) -> bytes:
    if isinstance(stored_hash, bytes):
        hashed = stored_hash
    elif isinstance(stored_hash, str):
        try:
            hashed = stored_hash.encode("ascii")
        except UnicodeEncodeError:
            raise MalformedHashError()
    else:
        raise MalformedHashError()

    # $2b$12$ + 22 chars of salt + 31 chars of checksum
    if len(hashed) != 60 or not hashed.startswith((b"$2a$", b"$2b$", b"$2y$")):
        raise MalformedHashError()
    return hashed


class PasswordHasher:
    """Salted adaptive password hashing with bcrypt.

    ``rounds`` is the bcrypt log2 work factor. Every ``hash_password`` call
    draws a fresh salt, so equal passwords never produce equal hashes.
    """

    def __init__(self, rounds: int = 12):
        if not 4 <= rounds <= 31:
            raise ValueError(f"bcrypt rounds must be between 4 and 31, got {rounds}")
        self.rounds = rounds

    def hash_password(self, plaintext: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(_password_bytes(plaintext), salt).decode("utf-8")

    def verify(self, plaintext: str, stored_hash: str) -> bool:
        """Check ``plaintext`` against ``stored_hash``.

        A hash that cannot be parsed counts as a failed verification.
        """
        try:
            hashed = _hash_bytes(stored_hash)
            return bcrypt.checkpw(_password_bytes(plaintext), hashed)
        except (MalformedHashError, ValueError):
            logger.warning("Stored password hash is malformed; treating as mismatch")
            return False

    @cached_property
    def dummy_hash(self) -> str:
        """Hash compared against when the username does not exist."""
        return self.hash_password("dummy-password-for-timing")
