"""Parameter validation helpers for RTTI requests.

All helpers are pure functions. The ``valid_*`` predicates return booleans,
except :func:`valid_lat_and_long` which raises when a coordinate pair is
supplied but unusable.
"""

import math
import re
from typing import Any

from .config import DEFAULT_STOP_MAX_RADIUS
from .exceptions import ValidationError

SERVICE_NAMES = ("location", "schedule", "all")

LATITUDE_RANGE = (-90.0, 90.0)
LONGITUDE_RANGE = (-180.0, 180.0)

_STOP_NO_PATTERN = re.compile(r"[1-9]\d{4}")
_INT_PATTERN = re.compile(r"[+-]?(0|[1-9]\d*)")


def is_blank(value: Any) -> bool:
    """Return True for None and empty or whitespace-only strings."""
    return value is None or (isinstance(value, str) and not value.strip())


def parse_int_in_range(value: Any, minimum: int, maximum: int) -> int | None:
    """Parse an integer filter value and check it against an inclusive range.

    Accepts ints, integral floats and decimal integer strings (surrounding
    whitespace allowed, no leading zeros). Booleans are rejected.

    Returns:
        The parsed integer, or None if the value is not an integer in range
    """
    if isinstance(value, bool):
        return None

    if isinstance(value, int):
        number = value
    elif isinstance(value, float):
        if not value.is_integer():
            return None
        number = int(value)
    elif isinstance(value, str):
        text = value.strip()
        if not _INT_PATTERN.fullmatch(text):
            return None
        number = int(text)
    else:
        return None

    if minimum <= number <= maximum:
        return number
    return None


def parse_float_in_range(value: Any, minimum: float, maximum: float) -> float | None:
    """Parse a float value and check it against an inclusive range."""
    if isinstance(value, bool) or value is None:
        return None

    try:
        number = float(value.strip() if isinstance(value, str) else value)
    except (TypeError, ValueError):
        return None

    if not math.isfinite(number) or not minimum <= number <= maximum:
        return None
    return number


def valid_stop_no(stop_no: Any) -> bool:
    """Check that a stop number is five digits long with no leading zero."""
    if isinstance(stop_no, bool):
        return False
    if isinstance(stop_no, int):
        text = str(stop_no)
    elif isinstance(stop_no, str):
        text = stop_no.strip()
    else:
        return False
    return _STOP_NO_PATTERN.fullmatch(text) is not None


def valid_radius(radius: Any) -> bool:
    """Check that a radius is an integer between 1 and the maximum stop radius."""
    return parse_int_in_range(radius, 1, DEFAULT_STOP_MAX_RADIUS) is not None


def valid_service_name(service_name: Any) -> bool:
    """Check that a service name is 'location', 'schedule' or 'all' (any case)."""
    return isinstance(service_name, str) and service_name.lower() in SERVICE_NAMES


def valid_lat_and_long(lat: Any, long: Any) -> bool:
    """Check a latitude/longitude pair.

    Returns:
        False when neither coordinate is supplied, True when both are valid

    Raises:
        ValidationError: If a coordinate is missing, non-numeric or out of range
    """
    if is_blank(lat) and is_blank(long):
        return False

    if parse_float_in_range(lat, *LATITUDE_RANGE) is None:
        raise ValidationError(
            "Invalid latitude provided. Make sure it is between -90.0 and 90.0 and try again."
        )

    if parse_float_in_range(long, *LONGITUDE_RANGE) is None:
        raise ValidationError(
            "Invalid longitude provided. Make sure it is between -180.0 and 180.0 and try again."
        )

    return True
