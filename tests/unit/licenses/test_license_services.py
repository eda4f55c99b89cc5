"""
Unit tests for License domain services.
"""

import base64
from datetime import date, datetime, timedelta

import pytest

from core.domain.value_objects import DomainMatchPolicy, ValidationStatus
from licenses.domain.codec import encode_license
from licenses.domain.license import LicenseRecord
from licenses.domain.services import (
    ABSENT_MESSAGE,
    MALFORMED_MESSAGE,
    VALID_MESSAGE,
    LicenseValidator,
    domain_matches,
)


@pytest.fixture
def expired_record():
    """Fixture for a record that expired before the fixed 'today'."""
    return LicenseRecord(
        key="LIC-EXPIRED01",
        domain="example.com",
        expiry_date=date(2026, 1, 1),
        generation_date=date(2025, 12, 1),
    )


class TestDomainMatches:
    """Tests for the domain matching rule."""

    def test_exact_match(self):
        """Test exact host matches."""
        assert domain_matches("example.com", "example.com") is True

    def test_subdomain_match(self):
        """Test subdomains match by suffix."""
        assert domain_matches("shop.example.com", "example.com") is True

    def test_unrelated_suffix_matches_under_suffix_policy(self):
        """Test the raw suffix rule accepts hosts that merely end with the domain."""
        assert domain_matches("notexample.com", "example.com") is True
        assert domain_matches("evilexample.com", "example.com") is True

    def test_unrelated_suffix_rejected_under_label_boundary_policy(self):
        """Test the hardened policy requires a '.' boundary."""
        policy = DomainMatchPolicy.LABEL_BOUNDARY
        assert domain_matches("notexample.com", "example.com", policy) is False
        assert domain_matches("shop.example.com", "example.com", policy) is True
        assert domain_matches("example.com", "example.com", policy) is True

    def test_different_domain(self):
        """Test unrelated hosts do not match."""
        assert domain_matches("example.org", "example.com") is False

    def test_host_is_normalized(self):
        """Test host case and whitespace are ignored."""
        assert domain_matches(" Shop.Example.COM ", "example.com") is True

    def test_empty_host(self):
        """Test an empty host never matches."""
        assert domain_matches("", "example.com") is False
        assert domain_matches(None, "example.com") is False


class TestLicenseValidator:
    """Tests for LicenseValidator service."""

    def test_validate_exact_domain(self, sample_record, today):
        """Test validating on the licensed domain."""
        outcome = LicenseValidator.validate(sample_record, "example.com", today)

        assert outcome.status is ValidationStatus.VALID
        assert outcome.is_valid is True
        assert outcome.message == VALID_MESSAGE
        assert outcome.record == sample_record

    def test_validate_subdomain(self, sample_record, today):
        """Test validating on a subdomain."""
        outcome = LicenseValidator.validate(sample_record, "shop.example.com", today)
        assert outcome.status is ValidationStatus.VALID

    def test_validate_suffix_weakness_is_accepted(self, sample_record, today):
        """Test 'notexample.com' is currently accepted for 'example.com'."""
        outcome = LicenseValidator.validate(sample_record, "notexample.com", today)
        assert outcome.status is ValidationStatus.VALID

    def test_validate_suffix_weakness_rejected_with_label_boundary(self, sample_record, today):
        """Test the hardened policy reports a mismatch for 'notexample.com'."""
        outcome = LicenseValidator.validate(
            sample_record, "notexample.com", today, DomainMatchPolicy.LABEL_BOUNDARY
        )
        assert outcome.status is ValidationStatus.DOMAIN_MISMATCH

    def test_validate_domain_mismatch(self, sample_record, today):
        """Test validating on another domain."""
        outcome = LicenseValidator.validate(sample_record, "other.org", today)

        assert outcome.status is ValidationStatus.DOMAIN_MISMATCH
        assert outcome.is_valid is False
        assert outcome.message == (
            'License invalid: This app is licensed for "example.com", '
            'but is running on "other.org".'
        )

    def test_validate_on_expiry_date(self, sample_record):
        """Test the expiry date itself is still valid."""
        outcome = LicenseValidator.validate(sample_record, "example.com", sample_record.expiry_date)
        assert outcome.status is ValidationStatus.VALID

    def test_validate_day_after_expiry(self, sample_record):
        """Test the day after the expiry date is expired."""
        day_after = sample_record.expiry_date + timedelta(days=1)
        outcome = LicenseValidator.validate(sample_record, "example.com", day_after)

        assert outcome.status is ValidationStatus.EXPIRED
        assert outcome.message == "License expired: This app's license expired on 2026-11-18."

    def test_validate_domain_checked_before_expiry(self, expired_record, today):
        """Test a mismatched and expired license reports the domain mismatch."""
        outcome = LicenseValidator.validate(expired_record, "other.org", today)
        assert outcome.status is ValidationStatus.DOMAIN_MISMATCH

    @pytest.mark.parametrize("host", ["example.com", "", "other.org"])
    @pytest.mark.parametrize("current_date", [date(2000, 1, 1), date(2099, 12, 31)])
    def test_validate_absent_record(self, host, current_date):
        """Test a missing record is ABSENT regardless of host and date."""
        outcome = LicenseValidator.validate(None, host, current_date)

        assert outcome.status is ValidationStatus.ABSENT
        assert outcome.message == ABSENT_MESSAGE
        assert outcome.record is None

    def test_validate_accepts_datetime(self, sample_record):
        """Test a datetime is compared by its date part."""
        late_on_expiry_day = datetime(2026, 11, 18, 23, 59, 59)
        outcome = LicenseValidator.validate(sample_record, "example.com", late_on_expiry_day)
        assert outcome.status is ValidationStatus.VALID

    def test_validate_does_not_mutate_record(self, sample_record):
        """Test validation leaves the record unchanged."""
        before = encode_license(sample_record)
        LicenseValidator.validate(sample_record, "other.org", date(2030, 1, 1))
        assert encode_license(sample_record) == before


class TestValidateToken:
    """Tests for LicenseValidator.validate_token."""

    def test_valid_token(self, sample_token, today):
        """Test a good token validates."""
        outcome = LicenseValidator.validate_token(sample_token, "app.example.com", today)
        assert outcome.status is ValidationStatus.VALID

    @pytest.mark.parametrize("token", [None, "", "   "])
    def test_missing_token_is_absent(self, token, today):
        """Test a missing token is ABSENT."""
        outcome = LicenseValidator.validate_token(token, "example.com", today)
        assert outcome.status is ValidationStatus.ABSENT

    def test_malformed_token(self, today):
        """Test an undecodable token is MALFORMED and does not raise."""
        outcome = LicenseValidator.validate_token("%%%not-a-token%%%", "example.com", today)

        assert outcome.status is ValidationStatus.MALFORMED
        assert outcome.message == MALFORMED_MESSAGE
        assert outcome.record is None

    def test_expired_token(self, sample_token):
        """Test an expired token reports EXPIRED."""
        outcome = LicenseValidator.validate_token(sample_token, "example.com", date(2027, 1, 1))
        assert outcome.status is ValidationStatus.EXPIRED

    def test_deeply_nested_token_is_malformed(self, today):
        """Test a token nesting JSON arrays past the parser's depth is MALFORMED."""
        token = base64.b64encode(b"[" * 3000).decode("ascii")
        outcome = LicenseValidator.validate_token(token, "example.com", today)
        assert outcome.status is ValidationStatus.MALFORMED
