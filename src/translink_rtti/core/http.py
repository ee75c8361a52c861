"""Generic HTTP transport used by the RTTI client."""

import logging
import re
from collections.abc import Mapping
from types import TracebackType
from urllib.parse import urlencode

import requests

from .config import DEFAULT_CONNECT_TIMEOUT
from .exceptions import NetworkError
from .models import HttpResponse

logger = logging.getLogger(__name__)

_API_KEY_PATTERN = re.compile(r"(apikey=)[^&\s'\"]+", re.IGNORECASE)


def redact_api_key(text: str) -> str:
    """Mask the apikey query parameter in a URL or error message."""
    return _API_KEY_PATTERN.sub(r"\1***", text)


class HttpTransport:
    """Thin GET/POST helper around a requests session."""

    def __init__(
        self,
        connect_timeout: float = DEFAULT_CONNECT_TIMEOUT,
        read_timeout: float | None = None,
    ):
        """Initialize the transport.

        Args:
            connect_timeout: Connect timeout in seconds
            read_timeout: Read timeout in seconds, None to wait indefinitely
        """
        self.connect_timeout = connect_timeout
        self.read_timeout = read_timeout
        self.session = requests.Session()

    @property
    def timeout(self) -> tuple[float, float | None]:
        return (self.connect_timeout, self.read_timeout)

    def get(
        self,
        url: str,
        headers: Mapping[str, str] | None = None,
        ssl_verify: bool = True,
    ) -> HttpResponse:
        """Execute a GET request, following redirects.

        Args:
            url: Fully built URL including query string
            headers: Optional headers to add to the request
            ssl_verify: Verify TLS certificates (keep on in production)

        Returns:
            HttpResponse with status code and body

        Raises:
            NetworkError: If the request could not be completed
        """
        return self._send(
            "GET",
            url,
            headers=dict(headers or {}),
            verify=ssl_verify,
            allow_redirects=True,
        )

    def post(
        self,
        url: str,
        data: str | bytes | Mapping[str, object],
        headers: Mapping[str, str] | None = None,
        ssl_verify: bool = True,
    ) -> HttpResponse:
        """Execute a POST request with ``data`` as the body.

        Args:
            url: URL to post to
            data: Encoded body, or a mapping of form parameters
            headers: Optional headers to add to the request
            ssl_verify: Verify TLS certificates (keep on in production)

        Returns:
            HttpResponse with status code and body

        Raises:
            NetworkError: If the request could not be completed
        """
        if isinstance(data, Mapping):
            body = urlencode(data).encode("utf-8")
        elif isinstance(data, str):
            body = data.encode("utf-8")
        else:
            body = data

        request_headers = dict(headers or {})
        request_headers["Content-Length"] = str(len(body))

        return self._send(
            "POST", url, headers=request_headers, data=body, verify=ssl_verify
        )

    def _send(self, method: str, url: str, **kwargs: object) -> HttpResponse:
        try:
            response = self.session.request(
                method, url, timeout=self.timeout, **kwargs  # type: ignore[arg-type]
            )
        except requests.exceptions.RequestException as e:
            message = redact_api_key(str(e))
            logger.warning(f"{method} {redact_api_key(url)} failed: {message}")
            raise NetworkError(f"Failed to complete {method} request: {message}") from e

        return HttpResponse(
            status_code=response.status_code,
            content=response.text,
            url=response.url or url,
        )

    def close(self) -> None:
        """Release the underlying session."""
        self.session.close()

    def __enter__(self) -> "HttpTransport":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
