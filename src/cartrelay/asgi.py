"""ASGI config for the cartrelay project."""

import os

from configurations.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "cartrelay.settings")
os.environ.setdefault("DJANGO_CONFIGURATION", "Development")

application = get_asgi_application()
