"""
License token codec.

A token is the standard-alphabet base64 encoding of the UTF-8 bytes of a
compact JSON object:

    {"key": "LIC-...", "domain": "example.com",
     "expiryDate": "YYYY-MM-DD", "generationDate": "YYYY-MM-DD"}

The encoding is reversible, not authenticated. Anyone can forge a token,
so it must not be used as a security boundary.
"""

import base64
import binascii
import json
import re
from datetime import date

from core.domain.exceptions import DecodingError, EncodingError
from licenses.domain.license import LicenseRecord

KEY_FIELD = "key"
DOMAIN_FIELD = "domain"
EXPIRY_DATE_FIELD = "expiryDate"
GENERATION_DATE_FIELD = "generationDate"

REQUIRED_FIELDS = (KEY_FIELD, DOMAIN_FIELD, EXPIRY_DATE_FIELD, GENERATION_DATE_FIELD)

_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def record_to_payload(record: LicenseRecord) -> dict:
    """Return the wire representation of a record as a dict."""
    return {
        KEY_FIELD: record.key,
        DOMAIN_FIELD: record.domain,
        EXPIRY_DATE_FIELD: record.expiry_date.isoformat(),
        GENERATION_DATE_FIELD: record.generation_date.isoformat(),
    }


def encode_license(record: LicenseRecord) -> str:
    """
    Encode a license record into a transport token.

    Args:
        record: License record to encode

    Returns:
        Base64 token string

    Raises:
        EncodingError: If the record cannot be serialized
    """
    try:
        text = json.dumps(record_to_payload(record), separators=(",", ":"), ensure_ascii=False)
        raw = text.encode("utf-8")
    except (AttributeError, TypeError, ValueError, UnicodeEncodeError) as exc:
        raise EncodingError(f"License could not be encoded: {exc}") from exc
    return base64.b64encode(raw).decode("ascii")


def decode_license(token: str) -> LicenseRecord:
    """
    Decode a transport token back into a license record.

    Args:
        token: Base64 token string

    Returns:
        LicenseRecord with all four fields populated

    Raises:
        DecodingError: If the token is not valid base64, not a JSON object,
            or is missing a required field
    """
    if not isinstance(token, str):
        raise DecodingError()

    try:
        raw = base64.b64decode(token.strip(), validate=True)
    except (binascii.Error, ValueError) as exc:
        raise DecodingError() from exc

    try:
        payload = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, ValueError, RecursionError) as exc:
        raise DecodingError("Invalid license format: token does not contain valid JSON.") from exc

    if not isinstance(payload, dict):
        raise DecodingError("Invalid license format: expected a JSON object.")

    for field in REQUIRED_FIELDS:
        if not isinstance(payload.get(field), str):
            raise DecodingError(f"Invalid license format: missing or invalid field '{field}'.")

    try:
        return LicenseRecord(
            key=payload[KEY_FIELD],
            domain=payload[DOMAIN_FIELD],
            expiry_date=_parse_iso_date(payload[EXPIRY_DATE_FIELD]),
            generation_date=_parse_iso_date(payload[GENERATION_DATE_FIELD]),
        )
    except ValueError as exc:
        raise DecodingError(f"Invalid license format: {exc}") from exc


def _parse_iso_date(value: str) -> date:
    """Parse a strict YYYY-MM-DD calendar date."""
    if not _ISO_DATE_RE.match(value):
        raise ValueError(f"date must use YYYY-MM-DD format: {value!r}")
    return date.fromisoformat(value)
