"""Dummy marketing backend."""

from cartrelay.marketing.backends import RemoteSubscriber

from .base import BaseBackend


class DummyBackend(BaseBackend):
    """Dummy marketing backend doing nothing."""

    def verify_connectivity(self, timeout: int = None) -> None:
        """Check nothing."""

    def ensure_schema(self, timeout: int = None) -> None:
        """Create nothing."""

    def add_subscriber(self, email: str, name: str, tags: list[str], timeout: int = None) -> dict:
        """Add a subscriber."""
        return {}

    def update_subscriber(self, email: str, merge_fields: dict, tags: list[str], timeout: int = None) -> dict:
        """Update a subscriber."""
        return {}

    def get_subscriber(self, email: str, timeout: int = None) -> RemoteSubscriber | None:
        """Know nobody."""
        return None

    def list_subscribers(self, timeout: int = None) -> list[RemoteSubscriber]:
        """List nobody."""
        return []

    def get_tags(self, email: str, timeout: int = None) -> list[str]:
        """Return no tags."""
        return []
