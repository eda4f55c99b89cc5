"""
Pytest configuration and shared fixtures.
"""

from datetime import date

import pytest
from django.core.cache import cache

from licenses.domain.codec import encode_license
from licenses.domain.license import LicenseRecord

EMBED_TEMPLATE = (
    "<html><head>"
    '<style nonce="NONCE_PLACEHOLDER">body {}</style>'
    "</head><body>"
    '<script nonce="NONCE_PLACEHOLDER">console.log("embed");</script>'
    "</body></html>"
)


@pytest.fixture(autouse=True)
def clear_cache():
    """Reset rate limiter counters between tests."""
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def today():
    """Fixed 'current date' for deterministic validation."""
    return date(2026, 10, 18)


@pytest.fixture
def sample_record():
    """Fixture for a sample LicenseRecord."""
    return LicenseRecord(
        key="LIC-AB12CD34E",
        domain="example.com",
        expiry_date=date(2026, 11, 18),
        generation_date=date(2026, 10, 18),
    )


@pytest.fixture
def sample_token(sample_record):
    """Fixture for the token of the sample record."""
    return encode_license(sample_record)


@pytest.fixture
def embed_template_dir(tmp_path, settings):
    """Point the embed endpoint at a temporary template directory."""
    (tmp_path / "embed.html").write_text(EMBED_TEMPLATE, encoding="utf-8")
    settings.EMBED_SETTINGS = {**settings.EMBED_SETTINGS, "TEMPLATE_DIR": tmp_path}
    return tmp_path


@pytest.fixture
def api_client():
    """Fixture for DRF API client."""
    from rest_framework.test import APIClient

    return APIClient()
