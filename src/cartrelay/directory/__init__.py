"""Subscriber directory module."""

from django.utils.functional import LazyObject

from .handler import DirectoryHandler


class DefaultDirectory(LazyObject):
    """Lazy object to handle the directory backend."""

    def _setup(self):
        """Configure the directory backend."""
        self._wrapped = directory_handler()


directory_handler = DirectoryHandler()
directory = DefaultDirectory()
