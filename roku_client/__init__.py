"""roku_client - asyncio client for Roku devices over the External Control Protocol.

Discover devices with SSDP, query installed apps and device information,
launch apps and script remote key presses.
"""

from __future__ import annotations

import logging

from .client import RokuClient
from .commander import Commander
from .discovery import discover, discover_all
from .exceptions import (
    RokuError,
    RokuNoDevicesFoundError,
    RokuProtocolError,
    RokuRequestFailedError,
    RokuValidationError,
)
from .keys import Key
from .models import App, DeviceInfo

__version__ = "2.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "App",
    "Commander",
    "DeviceInfo",
    "Key",
    "RokuClient",
    "RokuError",
    "RokuNoDevicesFoundError",
    "RokuProtocolError",
    "RokuRequestFailedError",
    "RokuValidationError",
    "__version__",
    "discover",
    "discover_all",
]
