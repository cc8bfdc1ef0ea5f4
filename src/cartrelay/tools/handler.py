"""Backend handler instantiating a backend from a settings dictionary."""

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils.functional import cached_property
from django.utils.module_loading import import_string


class BackendHandler:
    """
    Handler managing the instantiation of a pluggable backend.

    The backend definition is a dictionary structured like::

        {
            "BACKEND": "dotted.path.to.BackendClass",
            "PARAMETERS": {"keyword": "argument"},
        }

    Subclasses set `setting_name` to the Django setting holding this
    definition and `invalid_backend_error` to the exception raised when the
    dotted path cannot be imported.
    """

    setting_name = None
    invalid_backend_error = ImportError

    def __init__(self, backend=None):
        """Initialize the handler with an optional backend definition."""
        self._configured_backend = backend
        self._backend = backend
        self._instance = None

    @cached_property
    def backend(self):
        """Put in cache the backend properties from the settings."""
        if self._backend is None:
            try:
                self._backend = getattr(settings, self.setting_name).copy()
            except AttributeError as e:
                raise ImproperlyConfigured(f"settings.{self.setting_name} is not configured") from e
        return self._backend

    def __call__(self):
        """Create if not existing the backend and then return it."""
        if self._instance is None:
            self._instance = self.create_backend(self.backend)
        return self._instance

    def create_backend(self, params):
        """Instantiate and configure the backend."""
        params = params.copy()
        backend = params.pop("BACKEND")
        parameters = params.pop("PARAMETERS", {})
        try:
            klass = import_string(backend)
        except ImportError as e:
            raise self.invalid_backend_error(f"Could not find backend {backend!r}: {e}") from e
        return klass(**parameters)

    def reset(self):
        """Forget the instantiated backend so the next call reads the settings again."""
        self._instance = None
        self._backend = self._configured_backend
        self.__dict__.pop("backend", None)
