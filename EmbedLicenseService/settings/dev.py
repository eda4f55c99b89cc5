"""
Development settings for EmbedLicenseService.
"""

import os

from .base import *  # noqa: F403, F401

DEBUG = True

ALLOWED_HOSTS = ["localhost", "127.0.0.1", "0.0.0.0"]

# Fall back to a process-local cache when Redis is not running
if os.environ.get("CACHE_BACKEND") == "locmem":
    CACHES = {
        "default": {
            "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        }
    }

# Human-readable console logs for development
LOGGING["handlers"]["console"]["formatter"] = "simple"  # noqa: F405
