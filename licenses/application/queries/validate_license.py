"""
ValidateLicenseQuery.

Query to validate a license token against a host and a date.
"""
from dataclasses import dataclass
from datetime import date
from typing import Optional

from core.domain.value_objects import DomainMatchPolicy


@dataclass
class ValidateLicenseQuery:
    """Query to validate a license token."""

    token: Optional[str]
    current_host: str
    current_date: date
    policy: DomainMatchPolicy = DomainMatchPolicy.SUFFIX
