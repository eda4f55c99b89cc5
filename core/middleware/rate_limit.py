"""
Rate limiting middleware.

Caps requests per source address within a fixed time window.
"""

import hashlib
import logging
import time
from typing import Callable, Tuple

from django.conf import settings
from django.core.cache import cache
from django.http import HttpRequest, HttpResponse

from core.metrics import errors_total

logger = logging.getLogger(__name__)

EXEMPT_PATH_PREFIXES = ("/health", "/ready", "/metrics", "/api/docs", "/api/redoc", "/api/schema")


class RateLimitMiddleware:
    """
    Rate limiting middleware per source address.

    Counters live in the Django cache, one key per address and window.
    Default limits: 100 requests per 15 minutes per address.
    """

    DEFAULT_RATE_LIMIT = 100
    RATE_LIMIT_WINDOW = 15 * 60  # seconds

    def __init__(self, get_response: Callable):
        """Initialize middleware."""
        self.get_response = get_response

    @property
    def limit(self) -> int:
        """Maximum requests per window."""
        return getattr(settings, "RATE_LIMIT_SETTINGS", {}).get(
            "MAX_REQUESTS", self.DEFAULT_RATE_LIMIT
        )

    @property
    def window(self) -> int:
        """Window length in seconds."""
        return getattr(settings, "RATE_LIMIT_SETTINGS", {}).get(
            "WINDOW_SECONDS", self.RATE_LIMIT_WINDOW
        )

    @property
    def message(self) -> str:
        """Fixed rejection message for rate-limited clients."""
        minutes = max(1, self.window // 60)
        return f"Too many requests from this IP, please try again after {minutes} minutes"

    def _get_client_address(self, request: HttpRequest) -> str:
        """Return the source address of the request."""
        return request.META.get("REMOTE_ADDR") or "unknown"

    def _get_rate_limit_key(self, address: str) -> str:
        """
        Generate cache key for rate limiting.

        Args:
            address: Source address

        Returns:
            Cache key string
        """
        # Hash address for cache key (don't store raw IPs)
        address_hash = hashlib.sha256(address.encode()).hexdigest()[:16]
        return f"rate_limit:{address_hash}"

    def _check_rate_limit(self, address: str) -> Tuple[bool, int, int]:
        """
        Check if request is within rate limit.

        Args:
            address: Source address

        Returns:
            Tuple of (is_allowed, remaining, reset_time)
        """
        limit = self.limit
        window = self.window
        window_start = int(time.time() / window)
        reset_time = (window_start + 1) * window
        full_key = f"{self._get_rate_limit_key(address)}:{window_start}"

        current_count = cache.get(full_key, 0)
        if current_count >= limit:
            return False, 0, reset_time

        # add() only creates the key when it is missing
        if cache.add(full_key, 1, timeout=window):
            new_count = 1
        else:
            try:
                new_count = cache.incr(full_key, 1)
            except ValueError:
                # Key expired between add() and incr()
                cache.set(full_key, 1, timeout=window)
                new_count = 1

        return True, max(0, limit - new_count), reset_time

    def __call__(self, request: HttpRequest) -> HttpResponse:
        """
        Process request with rate limiting.

        Args:
            request: HTTP request

        Returns:
            HTTP response, or 429 when the address is over its limit
        """
        if request.path.startswith(EXEMPT_PATH_PREFIXES):
            return self.get_response(request)

        address = self._get_client_address(request)
        is_allowed, remaining, reset_time = self._check_rate_limit(address)

        if is_allowed:
            return self.get_response(request)

        errors_total.labels(error_type="rate_limit_exceeded", endpoint=request.path).inc()
        logger.warning("Rate limit exceeded", extra={"path": request.path, "limit": self.limit})

        response = HttpResponse(self.message, status=429, content_type="text/plain; charset=utf-8")
        # Rate limit headers (RFC 6585)
        response["X-RateLimit-Limit"] = str(self.limit)
        response["X-RateLimit-Remaining"] = str(remaining)
        response["X-RateLimit-Reset"] = str(reset_time)
        response["Retry-After"] = str(max(0, reset_time - int(time.time())))
        return response
