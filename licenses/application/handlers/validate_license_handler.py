"""
ValidateLicenseHandler.

Handler for validating a license token against a host and date.
"""

import logging

from core.domain.value_objects import ValidationStatus
from core.metrics import license_decode_failures_total, license_validations_total
from licenses.application.dto.license_dto import LicenseDTO, LicenseValidationDTO
from licenses.application.queries.validate_license import ValidateLicenseQuery
from licenses.domain.services import LicenseValidator

logger = logging.getLogger(__name__)


class ValidateLicenseHandler:
    """Handler for ValidateLicenseQuery."""

    def handle(self, query: ValidateLicenseQuery) -> LicenseValidationDTO:
        """
        Handle validate license query.

        Never raises for bad input: absent and malformed tokens come
        back as validation statuses.

        Args:
            query: ValidateLicenseQuery

        Returns:
            LicenseValidationDTO
        """
        outcome = LicenseValidator.validate_token(
            query.token,
            query.current_host,
            query.current_date,
            query.policy,
        )

        license_validations_total.labels(status=outcome.status.value).inc()
        if outcome.status is ValidationStatus.MALFORMED:
            license_decode_failures_total.inc()

        logger.info(
            "License validated",
            extra={
                "validation_status": outcome.status.value,
                "current_host": query.current_host,
                "current_date": query.current_date.isoformat(),
            },
        )

        return LicenseValidationDTO(
            status=outcome.status.value,
            is_valid=outcome.is_valid,
            message=outcome.message,
            license=LicenseDTO.from_record(outcome.record) if outcome.record else None,
        )
