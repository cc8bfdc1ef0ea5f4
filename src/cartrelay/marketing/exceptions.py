"""Marketing exceptions module."""


class MarketingError(Exception):
    """Base exception for all marketing exceptions."""


class MarketingInvalidBackendError(MarketingError):
    """Exception raised when the backend is invalid."""


class ConnectivityError(MarketingError):
    """Exception raised when the marketing platform cannot be reached."""


class RemoteApiError(MarketingError):
    """
    Exception raised when the marketing platform answers with an error.

    `status`, `title` and `detail` come from the problem document returned by
    the platform. `status` is None when no response was received at all.
    """

    def __init__(self, message, status=None, title=None, detail=None):
        """Keep the error details returned by the platform."""
        super().__init__(message)
        self.status = status
        self.title = title
        self.detail = detail or message


class SubscriberSyncError(MarketingError):
    """Exception raised when a local change could not be synchronized with the platform."""
