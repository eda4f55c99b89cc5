"""
Base Django settings for EmbedLicenseService.

These settings are shared across all environments.
Environment-specific overrides are in dev.py, test.py, and prod.py
"""
import os
from pathlib import Path

from .logging import get_logging_config

# Build paths inside the project
BASE_DIR = Path(__file__).resolve().parent.parent.parent

ENVIRONMENT = os.environ.get("ENVIRONMENT", "development")

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = os.environ.get(
    "DJANGO_SECRET_KEY",
    "django-insecure-7q%m2x!embed-license-local-only-k#v0t9s&w3z(8r_p1n",
)

DEBUG = False

ALLOWED_HOSTS = [
    host.strip()
    for host in os.environ.get("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1").split(",")
    if host.strip()
]

# Application definition
INSTALLED_APPS = [
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.staticfiles",
    # Third party
    "rest_framework",
    "drf_spectacular",
    # Local apps
    "EmbedLicenseService",
    "core",
    "licenses",
    "embed",
    "api",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
    # Custom middleware
    "core.middleware.observability.ObservabilityMiddleware",
    "core.middleware.metrics.MetricsMiddleware",
    "core.middleware.rate_limit.RateLimitMiddleware",
]

ROOT_URLCONF = "EmbedLicenseService.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
            ],
        },
    },
]

WSGI_APPLICATION = "EmbedLicenseService.wsgi.application"

# No persistence: licenses are evaluated statelessly from their tokens
DATABASES = {}

# Internationalization
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

# Static files (CSS, JavaScript, Images)
STATIC_URL = "static/"
STATIC_ROOT = BASE_DIR / "staticfiles"

# Default primary key field type
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# REST Framework
REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
    ],
    "DEFAULT_PARSER_CLASSES": [
        "rest_framework.parsers.JSONParser",
    ],
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": [],
    "UNAUTHENTICATED_USER": None,
    "EXCEPTION_HANDLER": "api.exceptions.custom_exception_handler",
    "DEFAULT_SCHEMA_CLASS": "drf_spectacular.openapi.AutoSchema",
}

# drf-spectacular settings
SPECTACULAR_SETTINGS = {
    "TITLE": "Embed License Service API",
    "DESCRIPTION": (
        "Issues self-contained domain license tokens, validates them against "
        "a host and date, and delivers the embeddable content under a "
        "per-request Content-Security-Policy nonce."
    ),
    "VERSION": "1.0.0",
    "SERVE_INCLUDE_SCHEMA": False,
    "COMPONENT_SPLIT_REQUEST": True,
    "SCHEMA_PATH_PREFIX": "/api",
    "TAGS": [
        {"name": "License API", "description": "License generation and validation"},
    ],
}

# Cache (rate limiter counters)
CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.redis.RedisCache",
        "LOCATION": os.environ.get("REDIS_URL", "redis://127.0.0.1:6379/1"),
        "OPTIONS": {
            "socket_connect_timeout": 5,
            "socket_timeout": 5,
        },
    }
}

# License tokens
LICENSE_SETTINGS = {
    # "suffix" keeps the raw string-suffix rule, "label_boundary" requires a "." boundary
    "DOMAIN_MATCH_POLICY": os.environ.get("LICENSE_DOMAIN_MATCH_POLICY", "suffix"),
}

# Embeddable content delivery
EMBED_SETTINGS = {
    "TEMPLATE_DIR": Path(
        os.environ.get("EMBED_TEMPLATE_DIR", BASE_DIR / "embed" / "templates" / "embed")
    ),
    "TEMPLATE_NAME": "embed.html",
    "NONCE_PLACEHOLDER": "NONCE_PLACEHOLDER",
    "DELIVERY_BASE_URL": os.environ.get(
        "EMBED_DELIVERY_BASE_URL", "https://viuflix.online/api/embed.html"
    ),
    "CSP": {
        "SCRIPT_SOURCES": [
            "https://unpkg.com",
            "https://cdn.tailwindcss.com",
            "https://www.gstatic.com",
        ],
        "STYLE_SOURCES": [
            "https://fonts.googleapis.com",
            "https://cdn.tailwindcss.com",
        ],
        "FONT_SOURCES": [
            "https://fonts.gstatic.com",
        ],
    },
}

# Rate limiting per source address
RATE_LIMIT_SETTINGS = {
    "MAX_REQUESTS": int(os.environ.get("RATE_LIMIT_MAX_REQUESTS", "100")),
    "WINDOW_SECONDS": int(os.environ.get("RATE_LIMIT_WINDOW_SECONDS", str(15 * 60))),
}

# Observability
LOGGING = get_logging_config(ENVIRONMENT)
