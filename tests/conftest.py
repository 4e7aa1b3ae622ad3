"""Shared fixtures for the test suite."""

import json

import httpx
import pytest

from resdiary_notifier import config as config_module

ENV_VARS = [
    "DISABLE_PUSHOVER",
    "PUSHOVER_API_KEY",
    "PUSHOVER_RECIPIENT",
    "RESERVATION_DATE",
    "RESTAURANT_NAME",
    "RESTAURANT_NAMES",
    "RESTAURANT_COVERS",
    "RESERVATION_IGNORE_THRESHOLD_HOUR",
    "RESERVATION_IGNORE_THRESHOLD_MINUTE",
    "LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Isolate every test from the host environment and the cached config."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config_module, "config", None)


@pytest.fixture
def required_env(monkeypatch):
    """Set the two required Pushover variables."""
    monkeypatch.setenv("PUSHOVER_API_KEY", "app-token")
    monkeypatch.setenv("PUSHOVER_RECIPIENT", "user-key")


def slot_payload(*times: str) -> dict:
    """Build an AvailabilitySearch body offering the given slot times."""
    return {
        "TimeSlots": [
            {
                "TimeSlot": t,
                "IsLeaveTimeRequired": False,
                "LeaveTime": "0001-01-01T00:00:00",
                "ServiceId": 1234,
                "HasStandardAvailability": True,
                "AvailablePromotions": [],
                "StandardAvailabilityFeeAmount": 0.0,
            }
            for t in times
        ],
        "Promotions": [],
        "StandardAvailabilityMayRequireCreditCard": False,
    }


def mock_http_client(handler) -> httpx.Client:
    """Create an httpx client whose requests are answered by handler."""
    return httpx.Client(transport=httpx.MockTransport(handler))


def json_response(payload, status_code: int = 200) -> httpx.Response:
    return httpx.Response(
        status_code,
        content=json.dumps(payload).encode(),
        headers={"content-type": "application/json"},
    )


@pytest.fixture
def make_payload():
    """Factory for AvailabilitySearch bodies."""
    return slot_payload


@pytest.fixture
def make_http_client():
    """Factory for httpx clients backed by a mock transport."""
    clients = []

    def factory(handler) -> httpx.Client:
        client = mock_http_client(handler)
        clients.append(client)
        return client

    yield factory
    for client in clients:
        client.close()


@pytest.fixture
def make_response():
    """Factory for JSON httpx responses."""
    return json_response
