"""
DecodeLicenseHandler.

Handler for inspecting the record behind a token.
"""

from core.domain.exceptions import DecodingError
from core.metrics import license_decode_failures_total
from licenses.application.dto.license_dto import LicenseDTO
from licenses.application.queries.decode_license import DecodeLicenseQuery
from licenses.domain.codec import decode_license


class DecodeLicenseHandler:
    """Handler for DecodeLicenseQuery."""

    def handle(self, query: DecodeLicenseQuery) -> LicenseDTO:
        """
        Handle decode license query.

        Raises:
            DecodingError: If the token is not a valid license token
        """
        try:
            record = decode_license(query.token)
        except DecodingError:
            license_decode_failures_total.inc()
            raise
        return LicenseDTO.from_record(record)
