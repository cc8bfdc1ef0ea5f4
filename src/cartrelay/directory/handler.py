"""Directory backend handler."""

from cartrelay.directory.exceptions import DirectoryInvalidBackendError
from cartrelay.tools.handler import BackendHandler


class DirectoryHandler(BackendHandler):
    """Directory handler managing the backend instantiation from settings.CARTRELAY_DIRECTORY."""

    setting_name = "CARTRELAY_DIRECTORY"
    invalid_backend_error = DirectoryInvalidBackendError
