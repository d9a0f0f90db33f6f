"""Roku ECP constants.

Endpoint paths and protocol defaults used for communicating with Roku
devices over the External Control Protocol.
"""

from __future__ import annotations

# ECP listens on plain HTTP, port 8060
DEFAULT_PORT = 8060
DEFAULT_SCHEME = "http"

# Default per-request timeout in seconds
DEFAULT_TIMEOUT = 10.0

# SSDP search target advertised by Roku devices
ROKU_SEARCH_TARGET = "roku:ecp"

# Default discovery window in seconds
DEFAULT_DISCOVERY_TIMEOUT = 10.0

# Default Commander pause in seconds
DEFAULT_WAIT = 1.0

# Query endpoints
API_ENDPOINT_APPS = "/query/apps"
API_ENDPOINT_ACTIVE_APP = "/query/active-app"
API_ENDPOINT_DEVICE_INFO = "/query/device-info"
API_ENDPOINT_ICON = "/query/icon/"

# Control endpoints
API_ENDPOINT_LAUNCH = "/launch/"
API_ENDPOINT_LAUNCH_DTV = "/launch/tvinput.dtv"
API_ENDPOINT_KEYPRESS = "/keypress/"
API_ENDPOINT_KEYDOWN = "/keydown/"
API_ENDPOINT_KEYUP = "/keyup/"

# Prefix for literal character input
LITERAL_KEY_PREFIX = "Lit_"
