"""
GenerateLicenseCommand.

Command to issue a new license record and its token.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass
class GenerateLicenseCommand:
    """
    Command to generate a license for a domain.

    When no expiry date is given the license runs for one calendar
    month from ``today``.
    """

    domain: str
    today: date
    expiry_date: Optional[date] = None
