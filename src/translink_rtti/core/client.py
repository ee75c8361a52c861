"""TransLink RTTI API client."""

import logging
import sys
from collections.abc import Mapping
from types import TracebackType
from typing import Any

from .config import (
    DEFAULT_STOP_MAX_RADIUS,
    MAX_BUS_COUNT,
    MAX_TIMEFRAME,
    ClientConfig,
)
from .exceptions import ApiError, ValidationError
from .http import HttpTransport, redact_api_key
from .models import ApiErrorPayload
from .validation import (
    is_blank,
    parse_int_in_range,
    valid_lat_and_long,
    valid_radius,
    valid_service_name,
    valid_stop_no,
)

logger = logging.getLogger(__name__)

Filters = Mapping[str, Any]

STOP_FILTERS = ("lat", "long", "radius", "routeNo")
ESTIMATE_FILTERS = ("count", "time_frame_min", "routeNo")
BUS_FILTERS = ("stopNo", "routeNo")
ROUTE_FILTERS = ("stopNo",)

INVALID_STOP_NO = "Invalid stop number. It must be five digits with no leading zeros."


class TranslinkClient:
    """Client for the TransLink Real-Time Transit Information API.

    Every public method validates its arguments, builds the request URL,
    performs a single GET and returns the decoded JSON unchanged.

    Example:
        >>> client = TranslinkClient("my-api-key")
        >>> client.get_stop_estimates(60980, {"count": 3})
    """

    def __init__(
        self,
        api_key: str,
        config: ClientConfig | None = None,
        transport: HttpTransport | None = None,
    ):
        """Initialize the client.

        Args:
            api_key: RTTI API key from developer.translink.ca
            config: Connection settings, defaults to the public API endpoint
            transport: HTTP transport, created from ``config`` when omitted

        Raises:
            ValidationError: If the API key is blank
        """
        if not isinstance(api_key, str) or not api_key.strip():
            raise ValidationError("Please specify a Translink RTTI API key.")

        self._api_key = api_key
        self.config = config or ClientConfig()
        self.transport = transport or HttpTransport(
            connect_timeout=self.config.connect_timeout,
            read_timeout=self.config.read_timeout,
        )

    @property
    def api_key(self) -> str:
        return self._api_key

    def get_stops(self, stop_no: int | str = 0, filters: Filters | None = None) -> Any:
        """Get stop information by stop number, location, radius or route.

        Args:
            stop_no: Five digit stop number, 0 to search by filters only
            filters: Optional 'lat', 'long', 'radius' (metres) and 'routeNo'

        Returns:
            Decoded JSON response

        Raises:
            ValidationError: If the stop number or filters are invalid
            ApiError: If the API reports an error
            NetworkError: If the request could not be completed
        """
        filters = self._accepted_filters(filters, STOP_FILTERS)
        has_stop_no = not is_blank(stop_no) and _format_value(stop_no) != "0"

        if has_stop_no and not valid_stop_no(stop_no):
            raise ValidationError(INVALID_STOP_NO)

        url = f"{self.config.base_url}/stops"
        if has_stop_no:
            url += f"/{_format_value(stop_no)}"
        url = self._append_api_key(url)

        lat = _get_filter(filters, "lat")
        long = _get_filter(filters, "long")
        radius = _get_filter(filters, "radius")
        route_no = _get_filter(filters, "routeNo")

        has_location = valid_lat_and_long(lat, long)
        if has_location:
            url += f"&lat={_format_value(lat)}&long={_format_value(long)}"

        if radius is not None:
            if not has_location:
                raise ValidationError(
                    "You must specify a latitude and longitude if you specify a radius."
                )
            if not valid_radius(radius):
                raise ValidationError(
                    f"You must specify a radius between 1 and {DEFAULT_STOP_MAX_RADIUS} meters."
                )
            url += f"&radius={parse_int_in_range(radius, 1, DEFAULT_STOP_MAX_RADIUS)}"

        if route_no is not None:
            if not has_location:
                raise ValidationError(
                    "You must specify a latitude and longitude if you specify a routeNo."
                )
            url += f"&routeNo={_format_value(route_no)}"

        return self._get_response(url)

    def get_stop_estimates(self, stop_no: int | str, filters: Filters | None = None) -> Any:
        """Get next bus estimates for a stop.

        Args:
            stop_no: Five digit stop number (required)
            filters: Optional 'count' (1-10 buses), 'time_frame_min'
                (1-120 minutes) and 'routeNo'. The API defaults to 6 buses
                within 120 minutes when these are omitted.

        Returns:
            Decoded JSON response

        Raises:
            ValidationError: If the stop number or filters are invalid
            ApiError: If the API reports an error
            NetworkError: If the request could not be completed
        """
        filters = self._accepted_filters(filters, ESTIMATE_FILTERS)

        if not valid_stop_no(stop_no):
            raise ValidationError(INVALID_STOP_NO)

        url = f"{self.config.base_url}/stops/{_format_value(stop_no)}/estimates"
        url = self._append_api_key(url)

        bus_count = _get_filter(filters, "count")
        count = None
        if bus_count is not None:
            count = parse_int_in_range(bus_count, 1, MAX_BUS_COUNT)
            if count is None:
                raise ValidationError(
                    f"Invalid bus count specified. Please try an integer between 1 and {MAX_BUS_COUNT}."
                )

        time_frame = _get_filter(filters, "time_frame_min")
        timeframe = None
        if time_frame is not None:
            timeframe = parse_int_in_range(time_frame, 1, MAX_TIMEFRAME)
            if timeframe is None:
                raise ValidationError(
                    f"Invalid time frame specified. Please try an integer between 1 and {MAX_TIMEFRAME}."
                )

        route_no = _get_filter(filters, "routeNo")

        if count is not None:
            url += f"&count={count}"
        if timeframe is not None:
            url += f"&timeframe={timeframe}"
        if route_no is not None:
            url += f"&routeNo={_format_value(route_no)}"

        return self._get_response(url)

    def get_buses(self, bus_no: int | str = 0, filters: Filters | None = None) -> Any:
        """Get real-time bus locations.

        Args:
            bus_no: Bus (vehicle) number, 0 for all buses
            filters: Optional 'stopNo' (five digits) and 'routeNo'

        Returns:
            Decoded JSON response

        Raises:
            ValidationError: If the bus number or stop number is invalid
            ApiError: If the API reports an error
            NetworkError: If the request could not be completed
        """
        filters = self._accepted_filters(filters, BUS_FILTERS)

        bus_number = 0
        if not is_blank(bus_no):
            parsed = parse_int_in_range(bus_no, -sys.maxsize, sys.maxsize)
            if parsed is None:
                raise ValidationError("Invalid bus number. It must be an integer.")
            bus_number = parsed

        url = f"{self.config.base_url}/buses"
        if bus_number > 0:
            url += f"/{bus_number}"
        url = self._append_api_key(url)

        url += self._stop_no_filter(filters)

        route_no = _get_filter(filters, "routeNo")
        if route_no is not None:
            url += f"&routeNo={_format_value(route_no)}"

        return self._get_response(url)

    def get_routes(self, route_no: str = "", filters: Filters | None = None) -> Any:
        """Get route information.

        Args:
            route_no: Route number, e.g. '099'. Blank for all routes.
            filters: Optional 'stopNo' (five digits)

        Returns:
            Decoded JSON response

        Raises:
            ValidationError: If the stop number is invalid
            ApiError: If the API reports an error
            NetworkError: If the request could not be completed
        """
        filters = self._accepted_filters(filters, ROUTE_FILTERS)

        url = f"{self.config.base_url}/routes"
        if not is_blank(route_no):
            url += f"/{_format_value(route_no)}"
        url = self._append_api_key(url)

        url += self._stop_no_filter(filters)

        return self._get_response(url)

    def get_status(self, service_name: str) -> Any:
        """Get the status of the 'location', 'schedule' or 'all' services.

        Raises:
            ValidationError: If the service name is not recognized
            ApiError: If the API reports an error
            NetworkError: If the request could not be completed
        """
        if not valid_service_name(service_name):
            raise ValidationError(
                'Invalid service name. Must be "location", "schedule" or "all".'
            )

        url = self._append_api_key(
            f"{self.config.base_url}/status/{service_name.lower()}"
        )
        return self._get_response(url)

    def _append_api_key(self, url: str) -> str:
        return f"{url}?apikey={self._api_key}"

    def _stop_no_filter(self, filters: Filters) -> str:
        stop_no = _get_filter(filters, "stopNo")
        if stop_no is None:
            return ""
        if not valid_stop_no(stop_no):
            raise ValidationError(INVALID_STOP_NO)
        return f"&stopNo={_format_value(stop_no)}"

    def _accepted_filters(self, filters: Filters | None, accepted: tuple[str, ...]) -> Filters:
        if not filters:
            return {}

        ignored = sorted(name for name in filters if name not in accepted)
        if ignored:
            logger.debug(f"Ignoring unsupported filters: {', '.join(ignored)}")
        return filters

    def _get_response(self, url: str) -> Any:
        """Call the API and decode its JSON response.

        Raises:
            ApiError: If the body is not JSON or contains an error payload
            NetworkError: If the request could not be completed
        """
        logger.debug(f"GET {redact_api_key(url)}")
        response = self.transport.get(
            url,
            headers={"Accept": "application/json"},
            ssl_verify=self.config.ssl_verify,
        )

        try:
            content = response.json_content()
        except ValueError as e:
            raise ApiError(
                f"RTTI API returned a non-JSON response (HTTP {response.status_code})",
                response.status_code,
            ) from e

        error = ApiErrorPayload.from_content(content)
        if error is not None:
            logger.warning(f"RTTI API error {error.code}: {error.message}")
            raise ApiError(error.message, error.code)

        return content

    def close(self) -> None:
        """Release the underlying HTTP session."""
        self.transport.close()

    def __enter__(self) -> "TranslinkClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def _get_filter(filters: Filters, name: str) -> Any:
    """Return a filter value, or None when it is absent or blank."""
    value = filters.get(name)
    if is_blank(value):
        return None
    return value


def _format_value(value: Any) -> str:
    return value.strip() if isinstance(value, str) else str(value)
