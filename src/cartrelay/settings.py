"""Django settings for the cartrelay project."""

from pathlib import Path

from configurations import Configuration, values

from cartrelay.configuration.values import SecretFileValue

BASE_DIR = Path(__file__).resolve().parent.parent.parent


class Base(Configuration):
    """
    Base configuration every other configuration inherits from.

    Values are read from environment variables, prefixed with `DJANGO_`
    unless stated otherwise.
    """

    DEBUG = False

    SECRET_KEY = SecretFileValue(None, environ_required=True)
    ALLOWED_HOSTS = values.ListValue([])

    INSTALLED_APPS = [
        "django.contrib.contenttypes",
        "django.contrib.auth",
        "rest_framework",
        "cartrelay",
    ]

    MIDDLEWARE = [
        "django.middleware.security.SecurityMiddleware",
        "django.middleware.common.CommonMiddleware",
    ]

    ROOT_URLCONF = "cartrelay.urls"
    WSGI_APPLICATION = "cartrelay.wsgi.application"

    # Users only live in memory, the database is never queried.
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": BASE_DIR / "db.sqlite3",
        }
    }

    LANGUAGE_CODE = "en-us"
    TIME_ZONE = "UTC"
    USE_I18N = False
    USE_TZ = True

    DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

    REST_FRAMEWORK = {
        "DEFAULT_AUTHENTICATION_CLASSES": [],
        "DEFAULT_PERMISSION_CLASSES": ["rest_framework.permissions.AllowAny"],
        "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
        "DEFAULT_PARSER_CLASSES": ["rest_framework.parsers.JSONParser"],
        "EXCEPTION_HANDLER": "cartrelay.api.exceptions.exception_handler",
        "UNAUTHENTICATED_USER": None,
        "TEST_REQUEST_DEFAULT_FORMAT": "json",
    }

    # Marketing platform
    MAILCHIMP_API_KEY = SecretFileValue(None, environ_prefix=None, environ_required=True)
    MAILCHIMP_SERVER_PREFIX = SecretFileValue(None, environ_prefix=None, environ_required=True)
    MAILCHIMP_AUDIENCE_ID = SecretFileValue(None, environ_prefix=None, environ_required=True)
    MAILCHIMP_TIMEOUT = values.PositiveIntegerValue(10, environ_prefix=None)

    CARTRELAY_MARKETING = {
        "BACKEND": "cartrelay.marketing.backends.mailchimp.MailchimpBackend",
    }
    CARTRELAY_DIRECTORY = {
        "BACKEND": "cartrelay.directory.backends.memory.InMemoryDirectory",
    }
    CARTRELAY_STARTUP_CHECKS = values.BooleanValue(True)

    LOGGING = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "verbose": {
                "format": "{levelname} {asctime} {module} {message}",
                "style": "{",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "verbose",
            },
        },
        "root": {
            "handlers": ["console"],
            "level": "INFO",
        },
    }


class Development(Base):
    """Development environment settings."""

    DEBUG = True
    ALLOWED_HOSTS = ["*"]
    SECRET_KEY = SecretFileValue("django-insecure-development-key")  # noqa: S105


class Test(Base):
    """Test environment settings."""

    ALLOWED_HOSTS = ["*"]
    SECRET_KEY = "django-insecure-test-key-for-testing-only"  # noqa: S105

    MAILCHIMP_API_KEY = "test-api-key-us1"
    MAILCHIMP_SERVER_PREFIX = "us1"
    MAILCHIMP_AUDIENCE_ID = "test-audience"
    MAILCHIMP_TIMEOUT = 5

    CARTRELAY_STARTUP_CHECKS = False


class Production(Base):
    """Production environment settings."""

    SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")
