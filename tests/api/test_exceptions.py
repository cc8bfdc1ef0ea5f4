"""Test the mapping of domain exceptions to responses."""

import pytest
from rest_framework.exceptions import NotFound

from cartrelay.api.exceptions import exception_handler
from cartrelay.api.views import UserListView
from cartrelay.directory.exceptions import UserNotFoundError
from cartrelay.marketing.exceptions import ConnectivityError, RemoteApiError, SubscriberSyncError


@pytest.mark.parametrize(
    ("exc", "status_code", "detail"),
    [
        (UserNotFoundError("jane@example.com"), 404, "User not found"),
        (ConnectivityError("Failed to connect to Mailchimp: boom"), 503, "Failed to connect to Mailchimp: boom"),
        (RemoteApiError("Member Exists: already a member", status=400), 502, "Member Exists: already a member"),
        (SubscriberSyncError("Mailchimp API error: already a member"), 502, "Mailchimp API error: already a member"),
    ],
)
def test_exception_handler_domain_errors(exc, status_code, detail):
    """Test directory and marketing errors are answered with their message."""
    response = exception_handler(exc, {"view": UserListView()})

    assert response.status_code == status_code
    assert response.data == {"detail": detail}


def test_exception_handler_drf_errors():
    """Test DRF errors keep their own handling."""
    response = exception_handler(NotFound("Nope"), {"view": UserListView()})

    assert response.status_code == 404
    assert response.data == {"detail": "Nope"}


def test_exception_handler_unknown_errors():
    """Test other errors are left to Django."""
    assert exception_handler(RuntimeError("boom"), {"view": UserListView()}) is None
