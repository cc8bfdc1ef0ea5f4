"""Map domain exceptions to API responses."""

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from cartrelay.directory.exceptions import UserNotFoundError
from cartrelay.marketing.exceptions import ConnectivityError, MarketingError

logger = logging.getLogger(__name__)

# First match wins, subclasses must come before their parents.
ERROR_STATUSES = (
    (UserNotFoundError, status.HTTP_404_NOT_FOUND),
    (ConnectivityError, status.HTTP_503_SERVICE_UNAVAILABLE),
    (MarketingError, status.HTTP_502_BAD_GATEWAY),
)


def exception_handler(exc, context):
    """Handle DRF exceptions, then the directory and marketing ones."""
    response = drf_exception_handler(exc, context)
    if response is not None:
        return response

    for exception_class, status_code in ERROR_STATUSES:
        if isinstance(exc, exception_class):
            logger.warning("%s answered %s: %s", context["view"].__class__.__name__, status_code, exc)
            return Response({"detail": str(exc)}, status=status_code)

    return None
