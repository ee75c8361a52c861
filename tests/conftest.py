"""Test configuration and fixtures."""

import pytest

from translink_rtti.core.client import TranslinkClient
from translink_rtti.core.config import TRANSLINK_DOMAIN


@pytest.fixture
def api_key():
    """API key used by test clients."""
    return "test-key"


@pytest.fixture
def client(api_key):
    """Client pointed at the default RTTI endpoint."""
    with TranslinkClient(api_key) as client:
        yield client


@pytest.fixture
def base_url():
    return TRANSLINK_DOMAIN


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep TRANSLINK_* variables from the developer's shell out of tests."""
    for name in (
        "TRANSLINK_API_KEY",
        "TRANSLINK_API_BASE_URL",
        "TRANSLINK_CONNECT_TIMEOUT",
        "TRANSLINK_SSL_VERIFY",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def sample_stops_response():
    """Sample /stops response."""
    return [
        {
            "StopNo": 50586,
            "Name": "WB DAVIE ST FS BIDWELL ST",
            "BayNo": "N",
            "City": "VANCOUVER",
            "OnStreet": "DAVIE ST",
            "AtStreet": "BIDWELL ST",
            "Latitude": 49.28,
            "Longitude": -123.14,
            "WheelchairAccess": 1,
            "Distance": 94,
            "Routes": "006",
        },
        {
            "StopNo": 50587,
            "Name": "EB DAVIE ST FS BIDWELL ST",
            "BayNo": "N",
            "City": "VANCOUVER",
            "OnStreet": "DAVIE ST",
            "AtStreet": "BIDWELL ST",
            "Latitude": 49.281,
            "Longitude": -123.139,
            "WheelchairAccess": 1,
            "Distance": 112,
            "Routes": "006",
        },
    ]


@pytest.fixture
def sample_estimates_response():
    """Sample /stops/{stopNo}/estimates response."""
    return [
        {
            "RouteNo": "099",
            "RouteName": "COMMERCIAL-BROADWAY/UBC (B-LINE)",
            "Direction": "WEST",
            "Schedules": [
                {
                    "Destination": "UBC",
                    "ExpectedLeaveTime": "10:41am",
                    "ExpectedCountdown": 4,
                    "ScheduleStatus": "*",
                    "CancelledTrip": False,
                    "CancelledStop": False,
                    "AddedTrip": False,
                    "AddedStop": False,
                },
                {
                    "Destination": "UBC",
                    "ExpectedLeaveTime": "10:47am",
                    "ExpectedCountdown": 10,
                    "ScheduleStatus": "-",
                    "CancelledTrip": False,
                    "CancelledStop": False,
                    "AddedTrip": False,
                    "AddedStop": False,
                },
            ],
        }
    ]


@pytest.fixture
def sample_error_response():
    """Error payload returned by the API for an unknown stop."""
    return {"Code": "3005", "Message": "No stop estimates found."}
