"""Custom exceptions for the TransLink RTTI client."""


class TranslinkError(Exception):
    """Base exception for TransLink RTTI client errors."""

    pass


class ApiError(TranslinkError):
    """Raised when the RTTI API reports an error in its response payload.

    Attributes:
        message: Human readable error message
        code: Numeric error code reported by the API (0 when not applicable)
    """

    def __init__(self, message: str = "", code: int = 0):
        super().__init__(message)
        self.message = message
        self.code = code

    def __str__(self) -> str:
        if self.code:
            return f"{self.message} (code {self.code})"
        return self.message


class ValidationError(ApiError):
    """Raised when input validation fails before a request is sent."""

    pass


class NetworkError(TranslinkError):
    """Raised when there's a network-related error."""

    pass
