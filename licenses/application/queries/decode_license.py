"""
DecodeLicenseQuery.

Query to inspect the record carried by a license token.
"""
from dataclasses import dataclass


@dataclass
class DecodeLicenseQuery:
    """Query to decode a license token."""

    token: str
