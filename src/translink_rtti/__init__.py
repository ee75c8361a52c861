"""TransLink RTTI Client Package

A Python client for the TransLink (Vancouver) Real-Time Transit Information
API with a small command line interface.
"""

__version__ = "0.1.0"

from .core.client import TranslinkClient
from .core.config import ClientConfig
from .core.exceptions import ApiError, NetworkError, TranslinkError, ValidationError

__all__ = [
    "ApiError",
    "ClientConfig",
    "NetworkError",
    "TranslinkClient",
    "TranslinkError",
    "ValidationError",
]
