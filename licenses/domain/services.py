"""
License domain services.

Domain services contain business logic that doesn't naturally
fit within a single entity.
"""
import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from core.domain.exceptions import DecodingError
from core.domain.value_objects import DomainMatchPolicy, ValidationStatus, normalize_domain
from licenses.domain.codec import decode_license
from licenses.domain.license import LicenseRecord

logger = logging.getLogger(__name__)

ABSENT_MESSAGE = (
    "No active license. Generate and apply one, or embed with a pre-configured license."
)
MALFORMED_MESSAGE = "Invalid license format or not a valid Base64 string."
VALID_MESSAGE = "License is valid and active!"


@dataclass(frozen=True)
class ValidationOutcome:
    """Tagged result of a license validation, with a display message."""

    status: ValidationStatus
    message: str
    record: Optional[LicenseRecord] = None

    @property
    def is_valid(self) -> bool:
        """Return True only for a valid license."""
        return self.status is ValidationStatus.VALID


def domain_matches(
    current_host: str,
    licensed_domain: str,
    policy: DomainMatchPolicy = DomainMatchPolicy.SUFFIX,
) -> bool:
    """
    Check whether a running host is covered by a licensed domain.

    With the SUFFIX policy any host ending in the licensed domain string
    matches, so "notexample.com" is accepted for "example.com".

    Args:
        current_host: Host the caller is running on
        licensed_domain: Normalized domain from the license record
        policy: Matching rule

    Returns:
        True if the host is covered by the license
    """
    host = normalize_domain(current_host or "")
    if not host:
        return False
    if host == licensed_domain:
        return True
    if policy is DomainMatchPolicy.LABEL_BOUNDARY:
        return host.endswith("." + licensed_domain)
    return host.endswith(licensed_domain)


class LicenseValidator:
    """Domain service for license validation."""

    @staticmethod
    def validate(
        record: Optional[LicenseRecord],
        current_host: str,
        current_date: date,
        policy: DomainMatchPolicy = DomainMatchPolicy.SUFFIX,
    ) -> ValidationOutcome:
        """
        Validate a license record against a host and a date.

        The domain is checked before the expiry date; the first failing
        check decides the outcome.

        Args:
            record: License record, or None when no license is active
            current_host: Host the caller is running on
            current_date: Today's date as seen by the caller
            policy: Domain matching rule

        Returns:
            ValidationOutcome
        """
        if record is None:
            return ValidationOutcome(ValidationStatus.ABSENT, ABSENT_MESSAGE)

        if isinstance(current_date, datetime):
            current_date = current_date.date()

        if not domain_matches(current_host, record.domain, policy):
            return ValidationOutcome(
                ValidationStatus.DOMAIN_MISMATCH,
                f'License invalid: This app is licensed for "{record.domain}", '
                f'but is running on "{current_host}".',
                record,
            )

        if record.is_expired_on(current_date):
            return ValidationOutcome(
                ValidationStatus.EXPIRED,
                f"License expired: This app's license expired on "
                f"{record.expiry_date.isoformat()}.",
                record,
            )

        return ValidationOutcome(ValidationStatus.VALID, VALID_MESSAGE, record)

    @staticmethod
    def validate_token(
        token: Optional[str],
        current_host: str,
        current_date: date,
        policy: DomainMatchPolicy = DomainMatchPolicy.SUFFIX,
    ) -> ValidationOutcome:
        """
        Decode a token and validate the resulting record.

        A missing token is ABSENT and an undecodable one is MALFORMED;
        neither raises.
        """
        if token is None or not token.strip():
            return LicenseValidator.validate(None, current_host, current_date, policy)

        try:
            record = decode_license(token)
        except DecodingError as exc:
            logger.warning("License token rejected: %s", exc.message)
            return ValidationOutcome(ValidationStatus.MALFORMED, MALFORMED_MESSAGE)

        return LicenseValidator.validate(record, current_host, current_date, policy)
