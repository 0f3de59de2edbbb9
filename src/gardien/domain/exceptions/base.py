"""
Base domain exceptions.
"""


class GardienException(Exception):
    """Base exception for all Gardien domain errors."""

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class MissingFieldError(GardienException):
    """Raised when a required request field is absent or empty."""

    def __init__(self, fields: list[str]):
        self.fields = fields
        message = f"Request body is missing required fields: {', '.join(fields)}"
        super().__init__(message, code="BAD_REQUEST")


class ConfigurationError(GardienException):
    """Raised at startup when configuration is inconsistent."""

    def __init__(self, message: str):
        super().__init__(message, code="CONFIGURATION_ERROR")
