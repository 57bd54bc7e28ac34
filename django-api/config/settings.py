"""Django settings for the marketplace landing page.

Values come from environment variables so one image serves every
deployment.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent


def env_bool(name: str, default: bool = False) -> bool:
    return os.environ.get(name, str(default)).lower() in ("1", "true", "yes")


SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "django-insecure-dev-only")
DEBUG = env_bool("DJANGO_DEBUG")
ALLOWED_HOSTS = [h for h in os.environ.get("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1").split(",") if h]

INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "rest_framework",
    "fulfillment",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "config.urls"
WSGI_APPLICATION = "config.wsgi.application"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

DATABASES = {
    "default": {
        "ENGINE": os.environ.get("DATABASE_ENGINE", "django.db.backends.sqlite3"),
        "NAME": os.environ.get("DATABASE_NAME", str(BASE_DIR / "db.sqlite3")),
        "USER": os.environ.get("DATABASE_USER", ""),
        "PASSWORD": os.environ.get("DATABASE_PASSWORD", ""),
        "HOST": os.environ.get("DATABASE_HOST", ""),
        "PORT": os.environ.get("DATABASE_PORT", ""),
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

STATIC_URL = "static/"

# Unauthenticated landing page visitors are challenged through this login view.
LOGIN_URL = os.environ.get("DJANGO_LOGIN_URL", "admin:login")

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [
        "rest_framework.authentication.SessionAuthentication",
    ],
}

FULFILLMENT = {
    "OFFER": {
        "IS_SETUP_COMPLETE": env_bool("OFFER_IS_SETUP_COMPLETE"),
        "OFFER_DISPLAY_NAME": os.environ.get("OFFER_DISPLAY_NAME", ""),
        "OFFER_MARKETING_PAGE_URL": os.environ.get("OFFER_MARKETING_PAGE_URL", ""),
        "OFFER_MARKETPLACE_LISTING_URL": os.environ.get("OFFER_MARKETPLACE_LISTING_URL", ""),
        "PUBLISHER_DISPLAY_NAME": os.environ.get("PUBLISHER_DISPLAY_NAME", ""),
        "PUBLISHER_COPYRIGHT_NOTICE": os.environ.get("PUBLISHER_COPYRIGHT_NOTICE", ""),
        "PUBLISHER_CONTACT_PAGE_URL": os.environ.get("PUBLISHER_CONTACT_PAGE_URL", ""),
        "PUBLISHER_HOME_PAGE_URL": os.environ.get("PUBLISHER_HOME_PAGE_URL", ""),
        "PUBLISHER_PRIVACY_NOTICE_PAGE_URL": os.environ.get("PUBLISHER_PRIVACY_NOTICE_PAGE_URL", ""),
        "SUBSCRIPTION_CONFIGURATION_URL": os.environ.get("SUBSCRIPTION_CONFIGURATION_URL", ""),
        "SUBSCRIPTION_PURCHASE_CONFIRMATION_URL": os.environ.get(
            "SUBSCRIPTION_PURCHASE_CONFIRMATION_URL", ""
        ),
    },
    "DEPLOYMENT": {
        "NAME": os.environ.get("DEPLOYMENT_NAME", "local"),
        "VERSION": os.environ.get("DEPLOYMENT_VERSION", "0.1.0"),
        "IS_TEST_MODE_ENABLED": env_bool("DEPLOYMENT_IS_TEST_MODE_ENABLED"),
    },
    # Marketplace client classes are deployment specific; no default is shipped.
    "SUBSCRIPTION_SERVICE": os.environ.get("FULFILLMENT_SUBSCRIPTION_SERVICE", ""),
    "OPERATION_SERVICE": os.environ.get("FULFILLMENT_OPERATION_SERVICE", ""),
    "SUBSCRIPTION_REPOSITORY": os.environ.get(
        "FULFILLMENT_SUBSCRIPTION_REPOSITORY",
        "fulfillment.stores.django_store.DjangoSubscriptionRepository",
    ),
    "EVENT_PUBLISHER": os.environ.get(
        "FULFILLMENT_EVENT_PUBLISHER",
        "fulfillment.stores.signal_publisher.SignalEventPublisher",
    ),
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {
            "format": "{asctime} {levelname} {name} {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "WARNING",
    },
    "loggers": {
        "fulfillment": {
            "level": os.environ.get("FULFILLMENT_LOG_LEVEL", "INFO"),
        },
    },
}
