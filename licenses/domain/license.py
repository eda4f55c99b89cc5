"""
LicenseRecord domain entity.

This is the core domain entity representing a domain license.
It has no persistence: the encoded token is its only durable form.
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from core.domain.value_objects import LicensedDomain
from licenses.domain.license_key import generate_license_key


@dataclass(frozen=True)
class LicenseRecord:
    """
    LicenseRecord domain entity.

    Binds a licensed domain to an expiry date. Immutable once created;
    validating a record never changes it.
    """

    key: str
    domain: str
    expiry_date: date
    generation_date: date

    def __post_init__(self):
        """Validate license record."""
        if not isinstance(self.key, str) or not self.key.strip():
            raise ValueError("License key cannot be empty")
        if not isinstance(self.domain, str):
            raise ValueError("Licensed domain must be a string")
        # Raises ValueError for empty or non-normalized domains
        LicensedDomain(self.domain)
        for field_name in ("expiry_date", "generation_date"):
            value = getattr(self, field_name)
            # datetime is a date subclass but carries a time component
            if not isinstance(value, date) or isinstance(value, datetime):
                raise ValueError(f"{field_name} must be a calendar date")

    @classmethod
    def create(
        cls,
        domain: str,
        expiry_date: date,
        today: date,
        key: Optional[str] = None,
    ) -> "LicenseRecord":
        """
        Create a new LicenseRecord.

        Args:
            domain: Licensed domain as typed by the user (normalized here)
            expiry_date: Last day on which the license is valid
            today: Issuance date
            key: Optional license key (generated if not provided)

        Returns:
            LicenseRecord instance
        """
        return cls(
            key=key or generate_license_key(),
            domain=LicensedDomain.parse(domain).value,
            expiry_date=expiry_date,
            generation_date=today,
        )

    def is_expired_on(self, current_date: date) -> bool:
        """Return True if the license is past its expiry date.

        The expiry date itself is still a valid day.
        """
        return current_date > self.expiry_date
