"""HTTP transport layer shared by the Roku API mixins.

``BaseRokuClient`` owns the device address, the aiohttp session and the
request plumbing. Mixins build on ``_request``/``_get_xml``/``_post`` and never
talk to aiohttp directly, except where a response body has to be streamed.
"""

from __future__ import annotations

import logging
from urllib.parse import urlsplit

from aiohttp import ClientResponse, ClientSession, ClientTimeout

from ..exceptions import RokuRequestFailedError, RokuValidationError
from ..models import XmlElement
from .constants import DEFAULT_PORT, DEFAULT_SCHEME, DEFAULT_TIMEOUT
from .parser import parse_xml

_LOGGER = logging.getLogger(__name__)


def normalize_address(address: str) -> str:
    """Return ``scheme://host:port`` for a device address.

    Accepts what discovery yields (``http://192.168.1.17:8060/``) as well as a
    bare host or ``host:port``. Bare hosts get the ECP scheme and port.

    Raises:
        RokuValidationError: If the address is empty or has an invalid port.
    """
    address = address.strip().rstrip("/")
    if not address:
        raise RokuValidationError("Device address must not be empty")
    if "://" in address:
        return address

    host = address
    if host.count(":") > 1 and not host.startswith("["):
        # Bare IPv6 literal
        host = f"[{host}]"
    url = f"{DEFAULT_SCHEME}://{host}"
    try:
        port = urlsplit(url).port
    except ValueError as err:
        raise RokuValidationError(f"Invalid device address: {address}") from err
    if port is None:
        url = f"{url}:{DEFAULT_PORT}"
    return url


class BaseRokuClient:
    """Address, session and request handling for a single Roku device.

    Args:
        address: Device address, e.g. ``http://192.168.1.17:8060``.
        timeout: Total per-request timeout in seconds.
        session: Optional shared aiohttp ClientSession. A session passed in is
            left open by ``close()``; one created here is closed by it.
        logger: Optional logger; defaults to the module logger.
    """

    def __init__(
        self,
        address: str,
        timeout: float = DEFAULT_TIMEOUT,
        session: ClientSession | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._address = normalize_address(address)
        self.timeout = timeout
        self._session = session
        self._owns_session = session is None
        self._logger = logger or _LOGGER

    @property
    def address(self) -> str:
        """Device address this client talks to."""
        return self._address

    def _url(self, path: str) -> str:
        return f"{self._address}{path}"

    async def _get_session(self) -> ClientSession:
        """Return the HTTP session, creating one on first use."""
        if self._session is None or (self._owns_session and self._session.closed):
            self._session = ClientSession(timeout=ClientTimeout(total=self.timeout))
            self._owns_session = True
        return self._session

    async def _open(self, method: str, path: str) -> ClientResponse:
        """Issue a request and return the (unread) response.

        The caller is responsible for using the response as an async context
        manager so the connection is released.
        """
        url = self._url(path)
        self._logger.debug("%s %s", method, url)
        session = await self._get_session()
        return await session.request(method, url)

    @staticmethod
    def _raise_for_status(resp: ClientResponse, endpoint: str) -> None:
        """Raise RokuRequestFailedError unless the response is 2xx."""
        if 200 <= resp.status < 300:
            return
        raise RokuRequestFailedError(
            f"Request failed: {resp.reason}",
            endpoint=endpoint,
            status=resp.status,
            reason=resp.reason,
        )

    async def _request(self, method: str, path: str) -> bytes:
        """Perform a request and return the response body.

        Raises:
            RokuRequestFailedError: If the device answers with a non-2xx status.
        """
        resp = await self._open(method, path)
        async with resp:
            self._raise_for_status(resp, self._url(path))
            return await resp.read()

    async def _get_xml(self, path: str) -> XmlElement:
        """GET ``path`` and decode the XML body."""
        body = await self._request("GET", path)
        return parse_xml(body, endpoint=self._url(path))

    async def _post(self, path: str) -> None:
        """POST to ``path``, discarding the body."""
        await self._request("POST", path)

    async def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._session is not None and self._owns_session and not self._session.closed:
            await self._session.close()
        self._session = None
