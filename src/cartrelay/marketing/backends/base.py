"""Marketing backend base module."""

from abc import ABC, abstractmethod

from cartrelay.marketing.backends import RemoteSubscriber


class BaseBackend(ABC):
    """Base class for all marketing backends."""

    @abstractmethod
    def verify_connectivity(self, timeout: int = None) -> None:
        """
        Check the marketing platform is reachable with the configured credentials.

        Raises:
            ConnectivityError: If the platform cannot be reached

        """

    @abstractmethod
    def ensure_schema(self, timeout: int = None) -> None:
        """
        Create the merge fields needed to track abandoned carts when missing.

        Never raises, failures are logged.
        """

    @abstractmethod
    def add_subscriber(self, email: str, name: str, tags: list[str], timeout: int = None) -> dict:
        """
        Subscribe a contact to the audience.

        Args:
            email: Email address of the contact
            name: Full name, split into first and last name
            tags: Tags attached to the new member
            timeout: API request timeout in seconds

        Returns:
            dict: Service response

        Raises:
            RemoteApiError: If the platform rejects the request

        """

    @abstractmethod
    def update_subscriber(self, email: str, merge_fields: dict, tags: list[str], timeout: int = None) -> dict:
        """
        Update the merge fields and tags of an existing member.

        `tags` is the complete set of tags the member must carry, not a delta.

        Raises:
            RemoteApiError: If the platform rejects the request

        """

    @abstractmethod
    def get_subscriber(self, email: str, timeout: int = None) -> RemoteSubscriber | None:
        """
        Retrieve a member of the audience.

        Returns None when the platform does not know the email.

        Raises:
            RemoteApiError: On any other failure

        """

    @abstractmethod
    def list_subscribers(self, timeout: int = None) -> list[RemoteSubscriber]:
        """Retrieve every member of the audience."""

    @abstractmethod
    def get_tags(self, email: str, timeout: int = None) -> list[str]:
        """
        Retrieve the tag names of a member.

        Raises:
            RemoteApiError: If the member lookup fails, including when it does not exist

        """
