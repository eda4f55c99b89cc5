"""
Value objects for the domain.

Value objects are immutable objects that are defined by their attributes
rather than their identity. They have no identity and are compared by value.
"""
from abc import ABC
from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for value objects.

    Value objects are immutable and compared by value.
    """

    def __eq__(self, other):
        """Compare value objects by their attributes."""
        if not isinstance(other, self.__class__):
            return False
        return self.__dict__ == other.__dict__

    def __hash__(self):
        """Make value objects hashable."""
        return hash(tuple(sorted(self.__dict__.items())))


def normalize_domain(value: str) -> str:
    """Return a host name in canonical form (trimmed, lowercase)."""
    return value.strip().lower()


@dataclass(frozen=True)
class LicensedDomain(ValueObject):
    """Domain name a license is bound to."""

    value: str

    def __post_init__(self):
        """Validate domain format."""
        if not self.value or not self.value.strip():
            raise ValueError("Licensed domain cannot be empty")
        if self.value != normalize_domain(self.value):
            raise ValueError(f"Licensed domain must be lowercase and trimmed: {self.value!r}")

    @classmethod
    def parse(cls, raw: str) -> "LicensedDomain":
        """Build a domain from user input, normalizing it first."""
        return cls(normalize_domain(raw or ""))

    def __str__(self) -> str:
        """Return domain as string."""
        return self.value


class ValidationStatus(Enum):
    """Result of validating a license against a host and date."""

    VALID = "valid"
    DOMAIN_MISMATCH = "domain_mismatch"
    EXPIRED = "expired"
    MALFORMED = "malformed"
    ABSENT = "absent"

    def __str__(self) -> str:
        """Return status as string."""
        return self.value


class DomainMatchPolicy(Enum):
    """How a running host is matched against a licensed domain."""

    # Raw string suffix: "notexample.com" matches "example.com"
    SUFFIX = "suffix"
    # Exact match or a subdomain ending in "." + domain
    LABEL_BOUNDARY = "label_boundary"

    def __str__(self) -> str:
        """Return policy as string."""
        return self.value
