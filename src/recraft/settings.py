"""
Django settings for the ReCraft backend.

Values come from environment variables; secrets live in `config/keys.py`.
"""

import os
import sys

import sentry_sdk
from sentry_sdk.integrations.django import DjangoIntegration

from config import keys

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

APP_ENV = os.environ.get("APP_ENV") or "development"
PRODUCTION = "production" in APP_ENV
DEVELOPMENT = "development" in APP_ENV
TESTING = ("test" in APP_ENV) or ("test" in sys.argv) or ("pytest" in sys.modules)

SECRET_KEY = keys.SECRET_KEY

DEBUG = DEVELOPMENT and not TESTING

ALLOWED_HOSTS = [
    host.strip()
    for host in os.environ.get("ALLOWED_HOSTS", "*").split(",")
    if host.strip()
]


# Application definition

INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "django_filters",
    "rest_framework",
    "rest_framework.authtoken",
    # Local apps
    "user",
    "institution",
    "ngo",
    "donation",
    "marketplace",
    "ethereum",
    "purchase",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "recraft.middleware.request_logging.RequestLogging",
    "recraft.middleware.error_handler.JsonErrorHandler",
]

ROOT_URLCONF = "recraft.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

WSGI_APPLICATION = "recraft.wsgi.application"


# Database
# PostgreSQL when DB_HOST is configured, a local SQLite file otherwise.

if keys.DB_HOST:
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.postgresql",
            "NAME": keys.DB_NAME,
            "USER": keys.DB_USER,
            "PASSWORD": keys.DB_PASS,
            "HOST": keys.DB_HOST,
            "PORT": keys.DB_PORT,
        }
    }
else:
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": os.path.join(BASE_DIR, "db.sqlite3"),
        }
    }

DEFAULT_AUTO_FIELD = "django.db.models.AutoField"

AUTH_USER_MODEL = "user.User"

AUTH_PASSWORD_VALIDATORS = [
    {
        "NAME": "django.contrib.auth.password_validation.MinimumLengthValidator",
        "OPTIONS": {"min_length": 6},
    },
]

if TESTING:
    PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

# Bearer tokens issued at register/login expire after this many days
AUTH_TOKEN_TTL_DAYS = int(os.environ.get("AUTH_TOKEN_TTL_DAYS", 7))


# Internationalization

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

STATIC_URL = "/static/"
STATIC_ROOT = os.path.join(BASE_DIR, "static")


# Django REST Framework

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [
        "user.authentication.BearerTokenAuthentication",
    ],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.AllowAny",
    ],
    "DEFAULT_FILTER_BACKENDS": [
        "django_filters.rest_framework.DjangoFilterBackend",
    ],
    "EXCEPTION_HANDLER": "recraft.exceptions.json_error_exception_handler",
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
    ],
}


# Web3

WEB3_NETWORK = os.environ.get("WEB3_NETWORK", "localhost")
WEB3_PROVIDER_URL = os.environ.get("WEB3_PROVIDER_URL", "http://localhost:8545")
WEB3_CHAIN_ID = int(os.environ.get("WEB3_CHAIN_ID", 31337))
RECRAFT_CONTRACT_ADDRESS = os.environ.get("RECRAFT_CONTRACT_ADDRESS", "")
PYUSD_TOKEN_ADDRESS = os.environ.get("PYUSD_TOKEN_ADDRESS", "")

NATIVE_DECIMALS = int(os.environ.get("NATIVE_DECIMALS", 18))
STABLE_DECIMALS = int(os.environ.get("STABLE_DECIMALS", 6))

# Fixed USD value of one unit of the native asset. No price feed is consulted.
NATIVE_TO_STABLE_RATE = os.environ.get("NATIVE_TO_STABLE_RATE", "2000")

RPC_MAX_RETRIES = int(os.environ.get("RPC_MAX_RETRIES", 3))
RPC_BASE_DELAY = float(os.environ.get("RPC_BASE_DELAY", 1.0))
RECEIPT_MAX_RETRIES = int(os.environ.get("RECEIPT_MAX_RETRIES", 5))
RECEIPT_BASE_DELAY = float(os.environ.get("RECEIPT_BASE_DELAY", 2.0))
RECEIPT_TIMEOUT_SECONDS = int(os.environ.get("RECEIPT_TIMEOUT_SECONDS", 120))


# Cross-chain bridge

BRIDGE_ENABLED = os.environ.get("BRIDGE_ENABLED", "false").lower() == "true"
TESTNET_MODE = os.environ.get("TESTNET_MODE", "true").lower() == "true"
BRIDGE_API_URL = os.environ.get("BRIDGE_API_URL", "")
BRIDGE_PROJECT_ID = keys.BRIDGE_PROJECT_ID
BRIDGE_RECEIPT_TIMEOUT_MS = int(os.environ.get("BRIDGE_RECEIPT_TIMEOUT_MS", 300000))


# Buyer toolkit

RECRAFT_API_URL = os.environ.get("RECRAFT_API_URL", "http://localhost:8000")
BUYER_PRIVATE_KEY = keys.BUYER_PRIVATE_KEY


# Logging

LOG_LEVEL = os.environ.get("LOG_LEVEL", "WARNING" if TESTING else "INFO")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "default",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": LOG_LEVEL,
    },
    "loggers": {
        "django.request": {
            "handlers": ["console"],
            "level": "ERROR",
            "propagate": False,
        },
    },
}


# Sentry

if keys.SENTRY_DSN and not TESTING:
    sentry_sdk.init(
        dsn=keys.SENTRY_DSN,
        environment=APP_ENV,
        integrations=[DjangoIntegration()],
        send_default_pii=False,
    )
