"""Core RTTI client functionality."""

from .client import TranslinkClient
from .config import ClientConfig
from .exceptions import (
    ApiError,
    NetworkError,
    TranslinkError,
    ValidationError,
)
from .http import HttpTransport
from .models import ApiErrorPayload, HttpResponse

__all__ = [
    "ApiError",
    "ApiErrorPayload",
    "ClientConfig",
    "HttpResponse",
    "HttpTransport",
    "NetworkError",
    "TranslinkClient",
    "TranslinkError",
    "ValidationError",
]
