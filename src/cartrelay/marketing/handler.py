"""Marketing backend handler."""

from cartrelay.marketing.exceptions import MarketingInvalidBackendError
from cartrelay.tools.handler import BackendHandler


class MarketingHandler(BackendHandler):
    """Marketing handler managing the backend instantiation from settings.CARTRELAY_MARKETING."""

    setting_name = "CARTRELAY_MARKETING"
    invalid_backend_error = MarketingInvalidBackendError
