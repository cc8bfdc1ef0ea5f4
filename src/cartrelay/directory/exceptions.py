"""Directory exceptions module."""


class DirectoryError(Exception):
    """Base exception for all directory exceptions."""


class DirectoryInvalidBackendError(DirectoryError):
    """Exception raised when the backend is invalid."""


class UserNotFoundError(DirectoryError):
    """Exception raised when no user is registered with the given email."""

    def __init__(self, email):
        """Keep the email that could not be found."""
        super().__init__("User not found")
        self.email = email
