"""
Domain exceptions.

Domain exceptions represent exceptional conditions raised by the
license codec and the embed delivery pipeline. Validation failures are
not exceptions: they are returned as ValidationOutcome values.
"""


class DomainException(Exception):
    """Base exception for all domain exceptions."""

    def __init__(self, message: str, code: str = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class LicenseException(DomainException):
    """Base exception for license token errors."""

    pass


class EncodingError(LicenseException):
    """Raised when a license record cannot be serialized into a token."""

    def __init__(self, message: str = "License could not be encoded"):
        super().__init__(message, code="ENCODING_ERROR")


class DecodingError(LicenseException):
    """Raised when a token is not a valid encoded license record."""

    def __init__(self, message: str = "Invalid license format or not a valid Base64 string."):
        super().__init__(message, code="DECODING_ERROR")


class EmbedException(DomainException):
    """Base exception for embeddable content delivery errors."""

    pass


class TemplateLoadError(EmbedException):
    """Raised when the embed template cannot be loaded."""

    def __init__(self, message: str = "Embed template could not be loaded", code: str = None):
        super().__init__(message, code=code or "TEMPLATE_LOAD_ERROR")


class TemplateNotFoundError(TemplateLoadError):
    """Raised when the embed template does not exist."""

    def __init__(self, message: str = "Embed template not found"):
        super().__init__(message, code="TEMPLATE_NOT_FOUND")


class TemplateReadError(TemplateLoadError):
    """Raised when the embed template exists but reading it failed."""

    def __init__(self, message: str = "Embed template could not be read"):
        super().__init__(message, code="TEMPLATE_READ_ERROR")
