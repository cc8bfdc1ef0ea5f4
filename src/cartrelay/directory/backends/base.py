"""Directory backend base module."""

from abc import ABC, abstractmethod

from cartrelay.directory.backends import User


class BaseDirectory(ABC):
    """Base class for all directory backends."""

    @abstractmethod
    def register(self, name: str, email: str) -> User:
        """
        Register a new user.

        Args:
            name: Full name of the user
            email: Email address, stored as given

        Returns:
            User: The registered user, with its id and signup date

        Raises:
            ValueError: If the name is empty or the email is malformed

        """

    @abstractmethod
    def find_by_email(self, email: str) -> User | None:
        """Return the first registered user with this exact email, if any."""

    @abstractmethod
    def update(self, email: str, name: str | None = None, new_email: str | None = None) -> User:
        """
        Update the name and/or email of a registered user.

        Raises:
            UserNotFoundError: If no user is registered with `email`

        """

    @abstractmethod
    def list(self) -> list[User]:
        """Return the registered users in registration order."""
