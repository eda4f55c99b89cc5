"""
CSP nonce issuance.
"""

import base64
import secrets
from typing import Callable

MIN_NONCE_BYTES = 16


class NonceIssuer:
    """
    Issues single-use nonces for Content-Security-Policy headers.

    Every call draws fresh bytes from the random source; nothing is cached
    between calls, so one issuer can be shared by concurrent requests.
    """

    def __init__(
        self,
        random_bytes: Callable[[int], bytes] = secrets.token_bytes,
        num_bytes: int = MIN_NONCE_BYTES,
    ):
        """
        Initialize issuer.

        Args:
            random_bytes: Source of random bytes, called with a byte count
            num_bytes: Bytes of randomness per nonce (at least 16)
        """
        if num_bytes < MIN_NONCE_BYTES:
            raise ValueError(f"Nonce needs at least {MIN_NONCE_BYTES} bytes of randomness")
        self._random_bytes = random_bytes
        self.num_bytes = num_bytes

    def issue(self) -> str:
        """Return a fresh base64-encoded nonce."""
        raw = self._random_bytes(self.num_bytes)
        if len(raw) < self.num_bytes:
            raise ValueError("Random source returned too few bytes")
        return base64.b64encode(raw).decode("ascii")
