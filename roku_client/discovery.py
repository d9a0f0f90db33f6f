"""Device discovery for Roku devices.

Roku players answer SSDP searches for the ``roku:ecp`` service type with a
``LOCATION`` header pointing at their ECP endpoint
(``http://<ip>:8060/``). This module collects those addresses within a bounded
window.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from async_upnp_client.search import SsdpSearchListener

from .api.constants import DEFAULT_DISCOVERY_TIMEOUT, ROKU_SEARCH_TARGET
from .exceptions import RokuNoDevicesFoundError

_LOGGER = logging.getLogger(__name__)

__all__ = [
    "discover",
    "discover_all",
]


def _extract_address(response: Any) -> str | None:
    """Return the device address from an SSDP response, or None."""
    location = response.get("location", "") or response.get("LOCATION", "")
    if not location:
        return None
    return location.strip().rstrip("/") or None


async def discover(
    timeout: float = DEFAULT_DISCOVERY_TIMEOUT,
    wait_for_all: bool = False,
    *,
    search_target: str = ROKU_SEARCH_TARGET,
    logger: logging.Logger | None = None,
) -> str | list[str]:
    """Discover Roku devices on the local network via SSDP.

    Args:
        timeout: Discovery window in seconds.
        wait_for_all: If False, return the first address as soon as it
            arrives. If True, wait for the whole window and return every
            address found.
        search_target: SSDP search target.
        logger: Optional logger; defaults to the module logger.

    Returns:
        The first device address, or a list of all addresses when
        ``wait_for_all`` is True.

    Raises:
        RokuNoDevicesFoundError: If no device answered within ``timeout``.
        OSError: If the multicast socket could not be set up.
    """
    log = logger or _LOGGER
    loop = asyncio.get_running_loop()
    addresses: list[str] = []
    first_found: asyncio.Future[str] = loop.create_future()

    async def process_response(response: Any) -> None:
        address = _extract_address(response)
        if address is None:
            log.debug("No location in SSDP response, skipping")
            return
        if address in addresses:
            return

        log.debug("SSDP discovered device @ %s", address)
        addresses.append(address)
        if not first_found.done():
            first_found.set_result(address)

    async def on_connect() -> None:
        listener.async_search()

    listener = SsdpSearchListener(
        async_callback=process_response,
        loop=loop,
        timeout=int(timeout) or 1,
        search_target=search_target,
        async_connect_callback=on_connect,
    )

    log.debug("Starting SSDP discovery for %s (timeout=%ss)", search_target, timeout)
    try:
        await listener.async_start()
        if wait_for_all:
            await asyncio.sleep(timeout)
        else:
            try:
                async with asyncio.timeout(timeout):
                    await first_found
            except TimeoutError:
                pass
    finally:
        listener.async_stop()
        if not first_found.done():
            first_found.cancel()

    if not addresses:
        raise RokuNoDevicesFoundError(timeout=timeout)

    log.info("SSDP discovery found %d device(s)", len(addresses))
    if wait_for_all:
        return list(addresses)
    return addresses[0]


async def discover_all(
    timeout: float = DEFAULT_DISCOVERY_TIMEOUT,
    *,
    logger: logging.Logger | None = None,
) -> list[str]:
    """Discover every Roku device that answers within ``timeout`` seconds."""
    return await discover(timeout, wait_for_all=True, logger=logger)  # type: ignore[return-value]
