"""Custom value classes for django-configurations."""

import os

from configurations import values
from django.core.exceptions import ImproperlyConfigured


class SecretFileValue(values.Value):
    """
    Class used to interpret value from environment variables with reading file support.

    The value set is either (in order of priority):
    * The content of the file referenced by the environment variable
      `{name}_{file_suffix}` if set, surrounding whitespace removed.
    * The value of the environment variable `{name}` if set.
    * The default value

    A required value found nowhere makes the configuration improper, which
    stops the process at startup.
    """

    file_suffix = "FILE"

    def __init__(self, *args, file_suffix=None, **kwargs):
        """Initialize the value."""
        super().__init__(*args, **kwargs)
        if file_suffix is not None:
            self.file_suffix = file_suffix

    def _read_file(self, filename):
        if not os.path.exists(filename):
            raise ImproperlyConfigured(f"Path {filename!r} does not exist.")
        try:
            with open(filename) as file:
                return file.read().strip()
        except OSError as err:
            raise ImproperlyConfigured(f"Path {filename!r} cannot be read: {err!r}") from err

    def setup(self, name):
        """Get the value from a file or from environment variables."""
        value = self.default
        if self.environ:
            full_environ_name = self.full_environ_name(name)
            full_environ_name_file = f"{full_environ_name}_{self.file_suffix}"
            if full_environ_name_file in os.environ:
                value = self.to_python(self._read_file(os.environ[full_environ_name_file]))
            elif full_environ_name in os.environ:
                value = self.to_python(os.environ[full_environ_name])
            elif self.environ_required:
                raise ImproperlyConfigured(
                    f"Value {name!r} is required to be set as the "
                    f"environment variable {full_environ_name_file!r} or {full_environ_name!r}"
                )
        self.value = value
        return value
