"""User lifecycle service."""

import logging

from cartrelay.directory import directory
from cartrelay.directory.backends import User
from cartrelay.marketing import marketing
from cartrelay.marketing.backends import RemoteSubscriber, UserMergeFields, union_tags
from cartrelay.marketing.exceptions import MarketingError, RemoteApiError, SubscriberSyncError

logger = logging.getLogger(__name__)

# The casing differs between both tags, existing segments rely on them.
NEW_CUSTOMER_TAG = "New-customer"
UPDATED_CUSTOMER_TAG = "New-Customer"


def _sync_error(err, message):
    """Describe a marketing failure, with Mailchimp's own detail when it answered."""
    if isinstance(err, RemoteApiError) and err.status is not None:
        return SubscriberSyncError(f"Mailchimp API error: {err.detail}")
    return SubscriberSyncError(f"{message}: {err}")


class UserService:
    """
    Register and update users locally, then mirror them in the marketing audience.

    Local changes are kept when the marketing platform fails.
    """

    def __init__(self, directory_backend=None, marketing_backend=None, timeout: int | None = None):
        """Use the configured backends unless others are given."""
        self.directory = directory if directory_backend is None else directory_backend
        self.marketing = marketing if marketing_backend is None else marketing_backend
        self.timeout = timeout

    def register_user(self, name: str, email: str) -> User:
        """Register a user and subscribe it as a new customer."""
        user = self.directory.register(name, email)

        try:
            self.marketing.add_subscriber(email, name, [NEW_CUSTOMER_TAG], timeout=self.timeout)
        except MarketingError as err:
            logger.error("Failed to subscribe user %s: %s", user.id, err)
            raise _sync_error(err, "Mailchimp integration failed") from err

        return user

    def update_user(self, email: str, name: str | None = None, new_email: str | None = None) -> User:
        """
        Update a user, then its audience member.

        The member is looked up with the email the user had before the update.
        When it does not exist yet, the user is subscribed instead.
        """
        user = self.directory.update(email, name=name, new_email=new_email)

        try:
            subscriber = self.marketing.get_subscriber(email, timeout=self.timeout)
            if subscriber is not None:
                self._update_subscriber(email, user, subscriber)
            else:
                self.marketing.add_subscriber(user.email, user.name, [UPDATED_CUSTOMER_TAG], timeout=self.timeout)
        except MarketingError as err:
            logger.error("Failed to synchronize user %s: %s", user.id, err)
            raise _sync_error(err, "Mailchimp integration failed") from err

        return user

    def _update_subscriber(self, email: str, user: User, subscriber: RemoteSubscriber):
        merge_fields = UserMergeFields.from_name(user.name, email=user.email)
        self.marketing.update_subscriber(
            email,
            merge_fields.as_dict(),
            union_tags(subscriber.tags, [UPDATED_CUSTOMER_TAG]),
            timeout=self.timeout,
        )

    def list_users(self) -> list[User]:
        """Return the users registered locally."""
        return self.directory.list()

    def list_remote_users(self) -> list[RemoteSubscriber]:
        """Return the members of the marketing audience."""
        try:
            return self.marketing.list_subscribers(timeout=self.timeout)
        except MarketingError as err:
            raise _sync_error(err, "Failed to get users from Mailchimp") from err

    def verify_connection(self) -> None:
        """Check the marketing platform is reachable."""
        self.marketing.verify_connectivity(timeout=self.timeout)
