"""Query helpers for Roku ECP.

This mixin covers the read-only ``/query`` endpoints: installed apps, the
active app, device information and app icons.

It assumes the base client provides ``_get_xml``/``_open``. No state is stored –
all results come from the device each call.
"""

from __future__ import annotations

import os
import re
import tempfile

from ..exceptions import RokuProtocolError
from ..models import App, DeviceInfo
from .constants import (
    API_ENDPOINT_ACTIVE_APP,
    API_ENDPOINT_APPS,
    API_ENDPOINT_DEVICE_INFO,
    API_ENDPOINT_ICON,
)
from .parser import parse_active_app, parse_apps, parse_device_info

_IMAGE_TYPE = re.compile(r"image/([\w.+-]+)")

_CHUNK_SIZE = 8192


class QueryAPI:
    """Device queries (apps, active app, device info, icons)."""

    async def apps(self) -> list[App]:
        """Get the apps installed on the device, in the order the device lists them.

        Raises:
            RokuRequestFailedError: If the request fails.
            RokuProtocolError: If the response is not valid XML or an app has no id.
        """
        root = await self._get_xml(API_ENDPOINT_APPS)  # type: ignore[attr-defined]
        return parse_apps(root, endpoint=self._url(API_ENDPOINT_APPS))  # type: ignore[attr-defined]

    async def active(self) -> App | None:
        """Get the app in the foreground, or None on the home screen.

        Raises:
            RokuRequestFailedError: If the request fails.
            RokuProtocolError: If the response does not hold exactly one app.
        """
        root = await self._get_xml(API_ENDPOINT_ACTIVE_APP)  # type: ignore[attr-defined]
        return parse_active_app(root, endpoint=self._url(API_ENDPOINT_ACTIVE_APP))  # type: ignore[attr-defined]

    async def info(self) -> DeviceInfo:
        """Get device information.

        Fields vary between devices and firmware. All keys are camel-cased,
        so ``user-device-name`` becomes ``userDeviceName``.
        """
        root = await self._get_xml(API_ENDPOINT_DEVICE_INFO)  # type: ignore[attr-defined]
        return parse_device_info(root)

    async def icon(self, app_id: str | int) -> str:
        """Download an app's icon to a temporary file and return its path.

        The file is kept after the call; the caller owns it.

        Args:
            app_id: Id of the app, as found in ``App.id``.

        Raises:
            RokuRequestFailedError: If the request fails.
            RokuProtocolError: If the response is not an image.
            OSError: If the temporary file cannot be created or written.
        """
        path = f"{API_ENDPOINT_ICON}{app_id}"
        endpoint = self._url(path)  # type: ignore[attr-defined]
        resp = await self._open("GET", path)  # type: ignore[attr-defined]
        async with resp:
            self._raise_for_status(resp, endpoint)  # type: ignore[attr-defined]

            content_type = resp.headers.get("Content-Type", "")
            match = _IMAGE_TYPE.match(content_type)
            if not match:
                raise RokuProtocolError(
                    f"Icon for app {app_id} has unexpected content type: {content_type!r}",
                    endpoint=endpoint,
                )

            fd, file_path = tempfile.mkstemp(suffix=f".{match.group(1)}")
            try:
                with os.fdopen(fd, "wb") as dest:
                    async for chunk in resp.content.iter_chunked(_CHUNK_SIZE):
                        dest.write(chunk)
            except BaseException:
                # No truncated icon is left behind on failure or cancellation
                os.unlink(file_path)
                raise

        self._logger.debug("Saved icon for app %s to %s", app_id, file_path)  # type: ignore[attr-defined]
        return file_path
