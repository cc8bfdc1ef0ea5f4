"""Fixtures for the test suite."""

import pytest
from django.utils.functional import empty

from cartrelay.directory import directory, directory_handler
from cartrelay.marketing import marketing, marketing_handler

MAILCHIMP_API_URL = "https://us1.api.mailchimp.com/3.0"
MAILCHIMP_MEMBERS_URL = f"{MAILCHIMP_API_URL}/lists/test-audience/members"


@pytest.fixture(autouse=True)
def _reset_backends():
    """
    Forget the backends instantiated during a test.

    The directory keeps users in memory and both backends read the settings
    only once, each test must start from fresh instances.
    """
    yield
    for lazy_backend, handler in ((marketing, marketing_handler), (directory, directory_handler)):
        handler.reset()
        lazy_backend._wrapped = empty  # noqa: SLF001
