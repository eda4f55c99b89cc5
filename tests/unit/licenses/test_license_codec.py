"""
Unit tests for the license token codec.
"""

import base64
import json
from datetime import date

import pytest

from core.domain.exceptions import DecodingError, EncodingError
from licenses.domain.codec import decode_license, encode_license, record_to_payload
from licenses.domain.license import LicenseRecord

SAMPLE_TOKEN = (
    "eyJrZXkiOiJMSUMtQUIxMkNEMzRFIiwiZG9tYWluIjoiZXhhbXBsZS5jb20iLCJleHBpcnlEYXRlIjoi"
    "MjAyNi0xMS0xOCIsImdlbmVyYXRpb25EYXRlIjoiMjAyNi0xMC0xOCJ9"
)


def _token(payload) -> str:
    """Encode an arbitrary JSON payload the way the codec does."""
    return base64.b64encode(json.dumps(payload).encode("utf-8")).decode("ascii")


def _payload(**overrides) -> dict:
    payload = {
        "key": "LIC-AB12CD34E",
        "domain": "example.com",
        "expiryDate": "2026-11-18",
        "generationDate": "2026-10-18",
    }
    payload.update(overrides)
    return payload


class TestEncodeLicense:
    """Tests for encode_license."""

    def test_encode_produces_compact_base64_json(self, sample_record):
        """Test the token is base64 of compact JSON with the wire keys."""
        assert encode_license(sample_record) == SAMPLE_TOKEN

    def test_encoded_payload_has_exactly_four_string_fields(self, sample_record):
        """Test the decoded payload carries the four wire fields as strings."""
        payload = json.loads(base64.b64decode(encode_license(sample_record)))
        assert payload == {
            "key": "LIC-AB12CD34E",
            "domain": "example.com",
            "expiryDate": "2026-11-18",
            "generationDate": "2026-10-18",
        }

    def test_encode_non_ascii_domain(self):
        """Test internationalized domains are UTF-8 encoded."""
        record = LicenseRecord(
            key="LIC-AB12CD34E",
            domain="bücher.example",
            expiry_date=date(2027, 1, 1),
            generation_date=date(2026, 1, 1),
        )
        raw = base64.b64decode(encode_license(record))
        assert "bücher.example".encode("utf-8") in raw

    def test_encode_rejects_non_record(self):
        """Test encoding something that is not a record fails cleanly."""
        with pytest.raises(EncodingError):
            encode_license(object())

    def test_record_to_payload_uses_iso_dates(self, sample_record):
        """Test dates are serialized as YYYY-MM-DD."""
        payload = record_to_payload(sample_record)
        assert payload["expiryDate"] == "2026-11-18"
        assert payload["generationDate"] == "2026-10-18"


class TestDecodeLicense:
    """Tests for decode_license."""

    def test_decode_sample_token(self, sample_record):
        """Test decoding a known token."""
        assert decode_license(SAMPLE_TOKEN) == sample_record

    @pytest.mark.parametrize(
        "domain,expiry,generated",
        [
            ("example.com", date(2026, 11, 18), date(2026, 10, 18)),
            ("shop.example.co.uk", date(2030, 2, 28), date(2029, 2, 28)),
            ("bücher.example", date(2024, 2, 29), date(2024, 1, 31)),
        ],
    )
    def test_round_trip(self, domain, expiry, generated):
        """Test decode(encode(r)) == r."""
        record = LicenseRecord.create(domain=domain, expiry_date=expiry, today=generated)
        assert decode_license(encode_license(record)) == record

    def test_decode_ignores_surrounding_whitespace(self, sample_record):
        """Test pasted tokens with trailing newlines still decode."""
        assert decode_license(f"  {SAMPLE_TOKEN}\n") == sample_record

    def test_decode_ignores_unknown_keys(self, sample_record):
        """Test extra payload keys are ignored."""
        token = _token(_payload(note="extra"))
        assert decode_license(token) == sample_record

    @pytest.mark.parametrize(
        "token",
        [
            "not base64!!",
            "abc",  # bad padding
            "eyJr ZXki",
            "",
        ],
    )
    def test_decode_invalid_base64(self, token):
        """Test malformed alphabet or padding raises DecodingError."""
        with pytest.raises(DecodingError):
            decode_license(token)

    def test_decode_non_string(self):
        """Test non-string input raises DecodingError."""
        with pytest.raises(DecodingError):
            decode_license(None)

    def test_decode_not_json(self):
        """Test base64 of non-JSON text raises DecodingError."""
        with pytest.raises(DecodingError, match="valid JSON"):
            decode_license(base64.b64encode(b"not json").decode())

    def test_decode_not_utf8(self):
        """Test base64 of invalid UTF-8 raises DecodingError."""
        with pytest.raises(DecodingError):
            decode_license(base64.b64encode(b"\xff\xfe\xfd").decode())

    def test_decode_json_array(self):
        """Test a JSON value that is not an object raises DecodingError."""
        with pytest.raises(DecodingError, match="JSON object"):
            decode_license(_token([1, 2, 3]))

    @pytest.mark.parametrize("field", ["key", "domain", "expiryDate", "generationDate"])
    def test_decode_missing_field(self, field):
        """Test every field is required."""
        payload = _payload()
        del payload[field]
        with pytest.raises(DecodingError, match=field):
            decode_license(_token(payload))

    @pytest.mark.parametrize("field", ["key", "domain", "expiryDate", "generationDate"])
    def test_decode_wrong_typed_field(self, field):
        """Test every field must be a string."""
        with pytest.raises(DecodingError, match=field):
            decode_license(_token(_payload(**{field: 20261118})))

    @pytest.mark.parametrize("value", ["18/11/2026", "2026-02-30", "20261118", "2026-1-5"])
    def test_decode_invalid_date(self, value):
        """Test dates must be valid YYYY-MM-DD calendar dates."""
        with pytest.raises(DecodingError):
            decode_license(_token(_payload(expiryDate=value)))

    def test_decode_non_normalized_domain(self):
        """Test uppercase domains are rejected rather than silently fixed."""
        with pytest.raises(DecodingError):
            decode_license(_token(_payload(domain="Example.com")))

    def test_decode_empty_domain(self):
        """Test empty domains are rejected."""
        with pytest.raises(DecodingError):
            decode_license(_token(_payload(domain="")))

    def test_decode_deeply_nested_json(self):
        """Test pathologically nested JSON is a decoding error, not a crash."""
        token = base64.b64encode(b"[" * 3000).decode("ascii")
        with pytest.raises(DecodingError):
            decode_license(token)
