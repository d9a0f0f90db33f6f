"""Remote control helpers for Roku ECP.

This mixin handles launching apps and sending key events. Single characters
are sent as ``Lit_`` literals so text can be typed into on-screen keyboards;
named keys (see :class:`~roku_client.keys.Key`) pass through unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import quote

from .constants import (
    API_ENDPOINT_KEYDOWN,
    API_ENDPOINT_KEYPRESS,
    API_ENDPOINT_KEYUP,
    API_ENDPOINT_LAUNCH,
    API_ENDPOINT_LAUNCH_DTV,
    LITERAL_KEY_PREFIX,
)

if TYPE_CHECKING:
    from ..commander import Commander


def encode_key(key: str) -> str:
    """Return the path segment for a key.

    A single character becomes ``Lit_<percent-encoded char>``; anything
    longer is treated as a named key.
    """
    key = str(key)
    if len(key) == 1:
        return f"{LITERAL_KEY_PREFIX}{quote(key, safe='')}"
    return key


class ControlAPI:
    """App launching and key events."""

    async def launch(self, app_id: str | int) -> None:
        """Launch the app with the given id.

        Raises:
            RokuRequestFailedError: If the request fails.
        """
        await self._post(f"{API_ENDPOINT_LAUNCH}{app_id}")  # type: ignore[attr-defined]

    async def launch_dtv(self, channel: str | int | None = None) -> None:
        """Launch the TV tuner, optionally tuned to ``channel`` (e.g. ``"8.1"``).

        Raises:
            RokuRequestFailedError: If the request fails.
        """
        path = API_ENDPOINT_LAUNCH_DTV
        if channel is not None and channel != "":
            path = f"{path}?ch={quote(str(channel), safe='.-')}"
        await self._post(path)  # type: ignore[attr-defined]

    async def keypress(self, key: str) -> None:
        """Press and release a remote key."""
        await self._post(f"{API_ENDPOINT_KEYPRESS}{encode_key(key)}")  # type: ignore[attr-defined]

    async def keydown(self, key: str) -> None:
        """Press and hold a remote key."""
        await self._post(f"{API_ENDPOINT_KEYDOWN}{encode_key(key)}")  # type: ignore[attr-defined]

    async def keyup(self, key: str) -> None:
        """Release a remote key previously held with ``keydown``."""
        await self._post(f"{API_ENDPOINT_KEYUP}{encode_key(key)}")  # type: ignore[attr-defined]

    async def text(self, text: str) -> None:
        """Type ``text`` one character at a time.

        Each keypress completes before the next is sent, so characters arrive
        in order. The first failing keypress aborts the rest.
        """
        for char in text:
            await self.keypress(char)

    def command(self) -> Commander:
        """Start a chainable script of remote actions bound to this client.

        Example:
            ```python
            await client.command().volume_up(10).up(2).select().text("Breaking Bad").enter().send()
            ```
        """
        from ..commander import Commander

        return Commander(self)  # type: ignore[arg-type]
