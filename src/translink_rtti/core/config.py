"""Configuration for the TransLink RTTI client."""

import os

from pydantic import BaseModel, Field

TRANSLINK_DOMAIN = "https://api.translink.ca/rttiapi/v1"

# Values the API applies server-side when a filter is omitted
DEFAULT_BUS_COUNT = 6
DEFAULT_TIMEFRAME = 120
DEFAULT_STOP_MAX_RADIUS = 2000

MAX_BUS_COUNT = 10
MAX_TIMEFRAME = 120
DEFAULT_CONNECT_TIMEOUT = 10

API_KEY_ENV = "TRANSLINK_API_KEY"
BASE_URL_ENV = "TRANSLINK_API_BASE_URL"
CONNECT_TIMEOUT_ENV = "TRANSLINK_CONNECT_TIMEOUT"
SSL_VERIFY_ENV = "TRANSLINK_SSL_VERIFY"

_FALSE_VALUES = {"0", "false", "no", "off"}


class ClientConfig(BaseModel):
    """Connection settings shared by the client and its transport."""

    base_url: str = Field(TRANSLINK_DOMAIN, description="RTTI API base URL")
    connect_timeout: float = Field(
        DEFAULT_CONNECT_TIMEOUT, gt=0, description="Connect timeout in seconds"
    )
    read_timeout: float | None = Field(
        None, gt=0, description="Read timeout in seconds (None waits indefinitely)"
    )
    ssl_verify: bool = Field(
        True, description="Verify TLS certificates (keep on in production)"
    )

    @property
    def timeout(self) -> tuple[float, float | None]:
        """Timeout tuple in the form accepted by requests."""
        return (self.connect_timeout, self.read_timeout)

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Build a config from ``TRANSLINK_*`` environment variables."""
        values: dict[str, object] = {}

        base_url = os.environ.get(BASE_URL_ENV, "").strip()
        if base_url:
            values["base_url"] = base_url.rstrip("/")

        connect_timeout = os.environ.get(CONNECT_TIMEOUT_ENV, "").strip()
        if connect_timeout:
            values["connect_timeout"] = connect_timeout

        ssl_verify = os.environ.get(SSL_VERIFY_ENV, "").strip()
        if ssl_verify:
            values["ssl_verify"] = ssl_verify.lower() not in _FALSE_VALUES

        return cls.model_validate(values)

