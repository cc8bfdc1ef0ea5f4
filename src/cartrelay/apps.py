"""Cartrelay application."""

import logging

from django.apps import AppConfig
from django.conf import settings

logger = logging.getLogger(__name__)


class CartrelayConfig(AppConfig):
    """Configuration class for the cartrelay app."""

    name = "cartrelay"
    verbose_name = "Cart relay"

    def ready(self):
        """
        Check the marketing platform before serving requests.

        An unreachable platform stops the process. Missing merge fields are
        created, failures to do so are only logged.
        """
        if not getattr(settings, "CARTRELAY_STARTUP_CHECKS", False):
            return

        # Imported here, the backend reads the settings when instantiated.
        from cartrelay.marketing import marketing  # noqa: PLC0415

        logger.info("Checking the marketing platform")
        marketing.verify_connectivity()
        marketing.ensure_schema()
