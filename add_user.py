#!/usr/bin/env python
"""Seed a user account.

Usage:
    python add_user.py [username] [password]
"""
import sys

from tasklist.database import create_tables, get_session
from tasklist.dependencies import password_hasher
from tasklist.exceptions import DuplicateUsernameError
from tasklist.models import User
from tasklist.repositories import UserRepository


def main(argv):
    username = argv[1] if len(argv) > 1 else "test"
    password = argv[2] if len(argv) > 2 else "password"

    # Create tables if not exist
    create_tables()

    with get_session() as db:
        users = UserRepository(db)
        try:
            users.save(User(username=username, password=password_hasher.hash_password(password)))
        except DuplicateUsernameError:
            print(f"User already exists: {username}")
            return 1

    print(f"User created: {username}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
