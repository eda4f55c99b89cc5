"""
License DTOs for API responses.
"""
from dataclasses import dataclass
from datetime import date
from typing import Optional

from licenses.domain.license import LicenseRecord


@dataclass
class LicenseDTO:
    """DTO for license record information."""

    key: str
    domain: str
    expiry_date: date
    generation_date: date

    @classmethod
    def from_record(cls, record: LicenseRecord) -> "LicenseDTO":
        """Build a DTO from a domain record."""
        return cls(
            key=record.key,
            domain=record.domain,
            expiry_date=record.expiry_date,
            generation_date=record.generation_date,
        )


@dataclass
class GeneratedLicenseDTO:
    """DTO for a newly generated license and its token."""

    key: str
    domain: str
    expiry_date: date
    generation_date: date
    token: str


@dataclass
class LicenseValidationDTO:
    """DTO for a license validation result."""

    status: str
    is_valid: bool
    message: str
    license: Optional[LicenseDTO]
