"""
GenerateLicenseHandler.

Handles the generate license command.
"""

import calendar
import logging
from datetime import date

from core.metrics import licenses_generated_total
from licenses.application.commands.generate_license import GenerateLicenseCommand
from licenses.application.dto.license_dto import GeneratedLicenseDTO
from licenses.domain.codec import encode_license
from licenses.domain.license import LicenseRecord

logger = logging.getLogger(__name__)


def add_one_month(day: date) -> date:
    """Return the same day one month later, clamped to the month's end."""
    year = day.year + (1 if day.month == 12 else 0)
    month = 1 if day.month == 12 else day.month + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


class GenerateLicenseHandler:
    """Handler for GenerateLicenseCommand."""

    def handle(self, command: GenerateLicenseCommand) -> GeneratedLicenseDTO:
        """
        Handle generate license command.

        Args:
            command: GenerateLicenseCommand

        Returns:
            GeneratedLicenseDTO with the record fields and its token

        Raises:
            ValueError: If the domain is empty after normalization
            EncodingError: If the record cannot be encoded
        """
        expiry_date = command.expiry_date or add_one_month(command.today)

        record = LicenseRecord.create(
            domain=command.domain,
            expiry_date=expiry_date,
            today=command.today,
        )
        token = encode_license(record)

        licenses_generated_total.inc()
        logger.info(
            "License generated",
            extra={
                "license_key": record.key,
                "domain": record.domain,
                "expiry_date": record.expiry_date.isoformat(),
            },
        )

        return GeneratedLicenseDTO(
            key=record.key,
            domain=record.domain,
            expiry_date=record.expiry_date,
            generation_date=record.generation_date,
            token=token,
        )
