import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..exceptions import DuplicateUsernameError
from ..models import User

logger = logging.getLogger(__name__)


class UserRepository:
    """Credential store backed by the ``users`` table.

    Lookups return ``None`` for a missing user. Database errors other than
    a unique violation propagate to the caller untouched.
    """

    def __init__(self, db: Session):
        self._db = db

    def find_by_username(self, username: str) -> Optional[User]:
        return self._db.query(User).filter(User.username == username).first()

    def find_by_id(self, user_id: int) -> Optional[User]:
        return self._db.get(User, user_id)

    def exists(self, username: str) -> bool:
        return self.find_by_username(username) is not None

    def save(self, user: User) -> User:
        """Insert or update ``user``.

        Raises DuplicateUsernameError if the username is taken by another
        record; the session is rolled back so nothing is overwritten.
        """
        self._db.add(user)
        try:
            self._db.commit()
        except IntegrityError:
            self._db.rollback()
            logger.info("Rejected duplicate username: %s", user.username)
            raise DuplicateUsernameError(user.username)
        self._db.refresh(user)
        return user
