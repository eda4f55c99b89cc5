"""
License key generation.

License keys are display-only identifiers; validation never looks at them.
"""

import re
import secrets
import string

LICENSE_KEY_PREFIX = "LIC"
LICENSE_KEY_LENGTH = 9
LICENSE_KEY_PATTERN = re.compile(rf"^{LICENSE_KEY_PREFIX}-[A-Z0-9]{{{LICENSE_KEY_LENGTH}}}$")


def generate_license_key() -> str:
    """
    Generate a license key in format: LIC-XXXXXXXXX.

    Returns:
        Generated license key string
    """
    chars = string.ascii_uppercase + string.digits
    body = "".join(secrets.choice(chars) for _ in range(LICENSE_KEY_LENGTH))
    return f"{LICENSE_KEY_PREFIX}-{body}"


def is_well_formed_key(key: str) -> bool:
    """Return True if the key follows the LIC-XXXXXXXXX format."""
    return bool(LICENSE_KEY_PATTERN.match(key or ""))
