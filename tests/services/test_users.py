"""Test the user lifecycle service."""

from unittest import mock

import pytest

from cartrelay.directory.backends.memory import InMemoryDirectory
from cartrelay.directory.exceptions import UserNotFoundError
from cartrelay.marketing.backends import RemoteSubscriber
from cartrelay.marketing.backends.base import BaseBackend
from cartrelay.marketing.exceptions import ConnectivityError, RemoteApiError, SubscriberSyncError
from cartrelay.services.users import UserService


@pytest.fixture(name="marketing_backend")
def fixture_marketing_backend():
    """Return a mocked marketing backend."""
    backend = mock.create_autospec(BaseBackend, instance=True)
    backend.get_subscriber.return_value = None
    return backend


@pytest.fixture(name="user_service")
def fixture_user_service(marketing_backend):
    """Return a user service with an empty directory."""
    return UserService(directory_backend=InMemoryDirectory(), marketing_backend=marketing_backend, timeout=7)


def test_register_user(user_service, marketing_backend):
    """Test a registered user is subscribed as a new customer."""
    user = user_service.register_user("Jane Doe", "jane@example.com")

    assert user.id == 1
    assert user_service.directory.find_by_email("jane@example.com") is user
    marketing_backend.add_subscriber.assert_called_once_with(
        "jane@example.com", "Jane Doe", ["New-customer"], timeout=7
    )


def test_register_user_remote_error_keeps_local_user(user_service, marketing_backend):
    """Test a rejected subscription is reported but the user stays registered."""
    marketing_backend.add_subscriber.side_effect = RemoteApiError(
        "Invalid Resource: Please provide a valid email address.",
        status=400,
        title="Invalid Resource",
        detail="Please provide a valid email address.",
    )

    with pytest.raises(SubscriberSyncError, match="Mailchimp API error: Please provide a valid email address."):
        user_service.register_user("Jane Doe", "jane@example.com")

    assert [user.email for user in user_service.list_users()] == ["jane@example.com"]


def test_register_user_network_error(user_service, marketing_backend):
    """Test a platform which did not answer is reported as an integration failure."""
    marketing_backend.add_subscriber.side_effect = RemoteApiError("Mailchimp request failed: Connection refused")

    with pytest.raises(SubscriberSyncError, match="Mailchimp integration failed: Mailchimp request failed"):
        user_service.register_user("Jane Doe", "jane@example.com")


def test_update_user_existing_subscriber(user_service, marketing_backend):
    """Test an existing member gets the new name, email and the updated customer tag."""
    user_service.directory.register("Jane Doe", "jane@example.com")
    marketing_backend.get_subscriber.return_value = RemoteSubscriber(
        id="member-id", email_address="jane@example.com", tags=["New-customer"]
    )

    user = user_service.update_user("jane@example.com", name="Jane Smith", new_email="jane.smith@example.com")

    assert user.name == "Jane Smith"
    assert user.email == "jane.smith@example.com"
    marketing_backend.get_subscriber.assert_called_once_with("jane@example.com", timeout=7)
    marketing_backend.update_subscriber.assert_called_once_with(
        "jane@example.com",
        {"FNAME": "Jane", "LNAME": "Smith", "EMAIL": "jane.smith@example.com"},
        ["New-customer", "New-Customer"],
        timeout=7,
    )
    marketing_backend.add_subscriber.assert_not_called()


def test_update_user_missing_subscriber(user_service, marketing_backend):
    """Test a user unknown to the platform is subscribed with its new details."""
    user_service.directory.register("Jane Doe", "jane@example.com")

    user_service.update_user("jane@example.com", new_email="jane.smith@example.com")

    marketing_backend.add_subscriber.assert_called_once_with(
        "jane.smith@example.com", "Jane Doe", ["New-Customer"], timeout=7
    )
    marketing_backend.update_subscriber.assert_not_called()


def test_update_user_unknown(user_service, marketing_backend):
    """Test updating an unknown user does not reach the platform."""
    with pytest.raises(UserNotFoundError):
        user_service.update_user("nobody@example.com", name="Nobody")

    marketing_backend.get_subscriber.assert_not_called()


def test_update_user_remote_error_keeps_local_change(user_service, marketing_backend):
    """Test the local update is kept when the platform fails."""
    user_service.directory.register("Jane Doe", "jane@example.com")
    marketing_backend.get_subscriber.side_effect = RemoteApiError(
        "Internal Server Error: Oops", status=500, title="Internal Server Error", detail="Oops"
    )

    with pytest.raises(SubscriberSyncError, match="Mailchimp API error: Oops"):
        user_service.update_user("jane@example.com", name="Jane Smith")

    assert user_service.directory.find_by_email("jane@example.com").name == "Jane Smith"


def test_list_remote_users(user_service, marketing_backend):
    """Test the audience members are returned."""
    subscribers = [RemoteSubscriber(id="1", email_address="jane@example.com")]
    marketing_backend.list_subscribers.return_value = subscribers

    assert user_service.list_remote_users() == subscribers
    marketing_backend.list_subscribers.assert_called_once_with(timeout=7)


def test_list_remote_users_error(user_service, marketing_backend):
    """Test a failure while listing is described."""
    marketing_backend.list_subscribers.side_effect = RemoteApiError("Mailchimp request failed: timed out")

    with pytest.raises(SubscriberSyncError, match="Failed to get users from Mailchimp: Mailchimp request failed"):
        user_service.list_remote_users()


def test_verify_connection(user_service, marketing_backend):
    """Test connectivity errors are not wrapped."""
    marketing_backend.verify_connectivity.side_effect = ConnectivityError("Failed to connect to Mailchimp: boom")

    with pytest.raises(ConnectivityError):
        user_service.verify_connection()

    marketing_backend.verify_connectivity.assert_called_once_with(timeout=7)


def test_user_service_default_backends():
    """Test the configured backends are used by default."""
    service = UserService()

    assert service.directory.__class__ is InMemoryDirectory
    assert service.timeout is None
