"""Main Roku client facade.

This module provides the RokuClient class that composes the API mixins into a
single interface for communicating with a Roku device over ECP.
"""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

from aiohttp import ClientSession

from .api.base import BaseRokuClient
from .api.constants import DEFAULT_DISCOVERY_TIMEOUT, DEFAULT_TIMEOUT
from .api.control import ControlAPI
from .api.query import QueryAPI
from .discovery import discover, discover_all
from .exceptions import (
    RokuError,
    RokuNoDevicesFoundError,
    RokuProtocolError,
    RokuRequestFailedError,
    RokuValidationError,
)


class RokuClient(QueryAPI, ControlAPI, BaseRokuClient):
    """Roku External Control Protocol client.

    The client holds a single device address and re-queries the device on
    every call; nothing is cached. Operations are independent and may run
    concurrently on the same client.

    Example:
        ```python
        import asyncio
        from roku_client import RokuClient

        async def main():
            async with await RokuClient.discover() as client:
                for app in await client.apps():
                    print(app.id, app.name)
                await client.command().home().down(2).select().send()

        asyncio.run(main())
        ```

    Args:
        address: Device address, e.g. ``http://192.168.1.17:8060``. A bare
            host or ``host:port`` is accepted.
        timeout: Network timeout in seconds (default: 10.0).
        session: Optional shared aiohttp ClientSession for connection pooling.
        logger: Optional logger; defaults to the ``roku_client.api.base`` logger.
    """

    def __init__(
        self,
        address: str,
        timeout: float = DEFAULT_TIMEOUT,
        session: ClientSession | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        super().__init__(address, timeout, session, logger)

    @classmethod
    async def discover(
        cls,
        timeout: float = DEFAULT_DISCOVERY_TIMEOUT,
        **kwargs: Any,
    ) -> RokuClient:
        """Return a client for the first Roku device found on the network.

        To talk to several devices, use :meth:`discover_all` instead.

        Args:
            timeout: Discovery window in seconds.
            **kwargs: Passed on to the client constructor.

        Raises:
            RokuNoDevicesFoundError: If no device answered in time.
        """
        address = await discover(timeout, logger=kwargs.get("logger"))
        return cls(address, **kwargs)  # type: ignore[arg-type]

    @classmethod
    async def discover_all(
        cls,
        timeout: float = DEFAULT_DISCOVERY_TIMEOUT,
        **kwargs: Any,
    ) -> list[RokuClient]:
        """Return a client for every Roku device found within ``timeout`` seconds.

        Raises:
            RokuNoDevicesFoundError: If no device answered in time.
        """
        addresses = await discover_all(timeout, logger=kwargs.get("logger"))
        return [cls(address, **kwargs) for address in addresses]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.address!r})"

    async def __aenter__(self) -> RokuClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()


# Export exceptions for convenience
__all__ = [
    "RokuClient",
    "RokuError",
    "RokuNoDevicesFoundError",
    "RokuProtocolError",
    "RokuRequestFailedError",
    "RokuValidationError",
]
