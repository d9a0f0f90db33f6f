"""Pytest configuration and fixtures for roku_client tests.

This module provides fixtures for both unit tests (with mocks) and
integration tests (with real devices).

Configuration is loaded from tests/devices.yaml, with environment
variable overrides supported for CI/CD flexibility.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
import yaml
from aiohttp import ClientSession

# Configure pytest-asyncio
pytest_plugins = ("pytest_asyncio",)


# ============================================================================
# Configuration Loading
# ============================================================================

TESTS_DIR = Path(__file__).parent
CONFIG_FILE = TESTS_DIR / "devices.yaml"


def _load_config() -> dict[str, Any]:
    """Load test configuration from devices.yaml."""
    if CONFIG_FILE.exists():
        with open(CONFIG_FILE) as f:
            return yaml.safe_load(f) or {}
    return {}


_CONFIG = _load_config()

# Environment variables override config file
# Example: ROKU_TEST_DEVICE=192.168.1.17 pytest tests/integration/
ROKU_TEST_DEVICE = os.getenv("ROKU_TEST_DEVICE") or _CONFIG.get("default_device")

_settings = _CONFIG.get("settings", {})
CONNECT_TIMEOUT = _settings.get("connect_timeout", 5.0)


# ============================================================================
# Helper Functions for Testing
# ============================================================================


def create_mock_response(
    body: str | bytes = b"",
    status: int = 200,
    reason: str = "OK",
    headers: dict[str, str] | None = None,
    chunks: list[bytes] | None = None,
) -> MagicMock:
    """Create a mock aiohttp response usable as an async context manager.

    Args:
        body: Response body returned by ``read()``.
        status: HTTP status code.
        reason: HTTP reason phrase.
        headers: Response headers.
        chunks: Body chunks yielded by ``content.iter_chunked()``.

    Returns:
        Mock ClientResponse object.
    """
    if isinstance(body, str):
        body = body.encode()

    response = MagicMock()
    response.status = status
    response.reason = reason
    response.headers = headers or {}
    response.read = AsyncMock(return_value=body)
    response.__aenter__ = AsyncMock(return_value=response)
    response.__aexit__ = AsyncMock(return_value=None)

    async def iter_chunked(_size: int):
        for chunk in chunks if chunks is not None else [body]:
            yield chunk

    response.content.iter_chunked = iter_chunked
    return response


def create_mock_error_response(status: int, reason: str = "Error") -> MagicMock:
    """Create a mock non-2xx response."""
    return create_mock_response(body=reason, status=status, reason=reason)


def requested_urls(session: MagicMock) -> list[tuple[str, str]]:
    """Return ``(method, url)`` for every request made on a mock session."""
    return [(call.args[0], call.args[1]) for call in session.request.call_args_list]


# ============================================================================
# Unit Test Fixtures (Mocks)
# ============================================================================


@pytest.fixture
def mock_aiohttp_session(request):
    """Mock aiohttp ClientSession for testing.

    ``request`` answers every call with an empty 200 response unless a test
    replaces it.
    """
    session = MagicMock(spec=ClientSession)
    session.closed = False
    session.close = AsyncMock()
    session.request = AsyncMock(side_effect=lambda *args, **kwargs: create_mock_response())

    def cleanup():
        session.closed = True

    request.addfinalizer(cleanup)

    return session


@pytest.fixture
def make_response():
    """Factory fixture for mock aiohttp responses (see ``create_mock_response``)."""
    return create_mock_response


@pytest.fixture
def make_error_response():
    """Factory fixture for mock non-2xx responses."""
    return create_mock_error_response


@pytest.fixture
def request_log():
    """Return a helper listing ``(method, url)`` of requests on a mock session."""
    return requested_urls


@pytest.fixture
def mock_client(mock_aiohttp_session):
    """Create a RokuClient bound to the mocked HTTP session."""
    from roku_client.client import RokuClient

    return RokuClient("http://192.168.1.17:8060", session=mock_aiohttp_session)


@pytest.fixture
def apps_xml() -> str:
    """Sample /query/apps response."""
    return """<?xml version="1.0" encoding="UTF-8" ?>
<apps>
    <app id="31012" type="menu" version="1.9.50">FandangoNOW Movies &amp; TV</app>
    <app id="12" subtype="ndka" type="appl" version="4.2.81179053">Netflix</app>
    <app id="tvinput.hdmi1" type="tvin" version="1.0.0">HDMI 1</app>
</apps>
"""


@pytest.fixture
def device_info_xml() -> str:
    """Sample /query/device-info response."""
    return """<?xml version="1.0" encoding="UTF-8" ?>
<device-info>
    <udn>015e5108-9000-1046-8035-b0a737964dfb</udn>
    <serial-number>1GU48T017973</serial-number>
    <vendor-name>Roku</vendor-name>
    <model-name>Roku Stick</model-name>
    <user-device-name>Living Room</user-device-name>
    <wifi-mac>b0:a7:37:96:4d:fa</wifi-mac>
    <is_tv>false</is_tv>
    <supports-suspend>false</supports-suspend>
    <software-version>7.00</software-version>
    <power-mode>PowerOn</power-mode>
</device-info>
"""


# ============================================================================
# Integration Test Fixtures (Real Devices)
# ============================================================================


def pytest_configure(config):
    """Register markers used by the test suite."""
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests (requires real device)",
    )
    config.addinivalue_line(
        "markers",
        "destructive: marks tests that change device state (launch apps, press keys)",
    )


def pytest_collection_modifyitems(config, items):
    """Automatically mark integration tests."""
    for item in items:
        if "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


@pytest.fixture(scope="session")
def real_device_available():
    """Check if a real device is available for integration testing."""
    return ROKU_TEST_DEVICE is not None


@pytest.fixture
async def real_device_client(real_device_available):
    """Create a real RokuClient for integration testing.

    Requires the ROKU_TEST_DEVICE environment variable (or tests/devices.yaml).
    Example: ROKU_TEST_DEVICE=192.168.1.17 pytest tests/integration/

    Yields:
        RokuClient instance connected to the real device.
    """
    if not real_device_available:
        pytest.skip("No real device configured. Set ROKU_TEST_DEVICE environment variable.")

    from roku_client.client import RokuClient

    client = RokuClient(ROKU_TEST_DEVICE, timeout=CONNECT_TIMEOUT)
    yield client
    await client.close()
