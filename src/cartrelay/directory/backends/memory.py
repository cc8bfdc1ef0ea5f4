"""In-memory directory backend."""

import itertools
import logging
import threading

from django.utils import timezone

from cartrelay.directory.backends import User
from cartrelay.directory.exceptions import UserNotFoundError
from cartrelay.tools.email import is_valid_email

from .base import BaseDirectory

logger = logging.getLogger(__name__)


class InMemoryDirectory(BaseDirectory):
    """
    Directory keeping users in process memory.

    Users are lost when the process stops. Ids are assigned sequentially from 1
    and an email index gives constant time lookups. Duplicate emails are
    accepted, the earliest registered user wins on lookup.
    """

    def __init__(self):
        """Initialize an empty directory."""
        self._lock = threading.Lock()
        self._users = {}
        self._index = {}
        self._ids = itertools.count(1)

    def register(self, name: str, email: str) -> User:
        """Register a new user with the next sequential id."""
        if not name:
            raise ValueError("Name is required")
        if not is_valid_email(email):
            raise ValueError("Invalid email format")

        with self._lock:
            user = User(id=next(self._ids), name=name, email=email, signup_date=timezone.now())
            self._users[user.id] = user
            self._index.setdefault(email, user.id)

        logger.info("Registered user %s", user.id)
        return user

    def find_by_email(self, email: str) -> User | None:
        """Return the first registered user with this exact email, if any."""
        user_id = self._index.get(email)
        if user_id is None:
            return None
        return self._users[user_id]

    def update(self, email: str, name: str | None = None, new_email: str | None = None) -> User:
        """Update the provided fields only, id and signup date are kept."""
        with self._lock:
            user = self.find_by_email(email)
            if user is None:
                raise UserNotFoundError(email)

            if name:
                user.name = name
            if new_email and new_email != user.email:
                user.email = new_email
                self._reindex(email)
                self._reindex(new_email)

        logger.info("Updated user %s", user.id)
        return user

    def _reindex(self, email):
        """Point the index entry of an email to its earliest registered user."""
        user_id = next((user.id for user in self._users.values() if user.email == email), None)
        if user_id is None:
            self._index.pop(email, None)
        else:
            self._index[email] = user_id

    def list(self) -> list[User]:
        """Return a snapshot of the users in registration order."""
        with self._lock:
            return list(self._users.values())
