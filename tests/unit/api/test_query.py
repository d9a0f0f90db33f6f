"""Unit tests for QueryAPI mixin.

Tests apps, active app, device info and icon download.
"""

from __future__ import annotations

import asyncio
import os
import tempfile
from unittest.mock import AsyncMock, patch

import pytest
from aiohttp import ClientPayloadError

from roku_client.exceptions import RokuProtocolError, RokuRequestFailedError
from roku_client.models import App


class TestQueryAPI:
    """Test QueryAPI mixin methods."""

    @pytest.mark.asyncio
    async def test_apps(self, mock_client, mock_aiohttp_session, make_response, apps_xml):
        mock_aiohttp_session.request = AsyncMock(return_value=make_response(apps_xml))

        apps = await mock_client.apps()

        assert [app.id for app in apps] == ["31012", "12", "tvinput.hdmi1"]
        assert all(isinstance(app, App) for app in apps)
        mock_aiohttp_session.request.assert_called_once_with("GET", "http://192.168.1.17:8060/query/apps")

    @pytest.mark.asyncio
    async def test_apps_request_failed(self, mock_client, mock_aiohttp_session, make_error_response):
        mock_aiohttp_session.request = AsyncMock(return_value=make_error_response(503, "Service Unavailable"))

        with pytest.raises(RokuRequestFailedError) as exc_info:
            await mock_client.apps()

        assert exc_info.value.status == 503

    @pytest.mark.asyncio
    async def test_active(self, mock_client, mock_aiohttp_session, make_response):
        xml = '<active-app><app id="12" type="appl" version="4.1.218">Netflix</app></active-app>'
        mock_aiohttp_session.request = AsyncMock(return_value=make_response(xml))

        active = await mock_client.active()

        assert active == App(id="12", name="Netflix", type="appl", version="4.1.218")
        mock_aiohttp_session.request.assert_called_once_with("GET", "http://192.168.1.17:8060/query/active-app")

    @pytest.mark.asyncio
    async def test_active_home_screen(self, mock_client, mock_aiohttp_session, make_response):
        mock_aiohttp_session.request = AsyncMock(return_value=make_response("<active-app><app>Roku</app></active-app>"))

        assert await mock_client.active() is None

    @pytest.mark.asyncio
    async def test_active_multiple_apps(self, mock_client, mock_aiohttp_session, make_response):
        xml = '<active-app><app id="1">A</app><app id="2">B</app></active-app>'
        mock_aiohttp_session.request = AsyncMock(return_value=make_response(xml))

        with pytest.raises(RokuProtocolError) as exc_info:
            await mock_client.active()

        assert exc_info.value.endpoint == "http://192.168.1.17:8060/query/active-app"

    @pytest.mark.asyncio
    async def test_info(self, mock_client, mock_aiohttp_session, make_response, device_info_xml):
        mock_aiohttp_session.request = AsyncMock(return_value=make_response(device_info_xml))

        info = await mock_client.info()

        assert info["userDeviceName"] == "Living Room"
        assert info["serialNumber"] == "1GU48T017973"
        assert info["isTv"] == "false"
        mock_aiohttp_session.request.assert_called_once_with("GET", "http://192.168.1.17:8060/query/device-info")

    @pytest.mark.asyncio
    async def test_no_caching(self, mock_client, mock_aiohttp_session, make_response, device_info_xml):
        """Every call re-queries the device."""
        mock_aiohttp_session.request = AsyncMock(side_effect=lambda *args: make_response(device_info_xml))

        first = await mock_client.info()
        second = await mock_client.info()

        assert first == second
        assert mock_aiohttp_session.request.call_count == 2

    @pytest.mark.asyncio
    async def test_concurrent_queries(self, mock_client, mock_aiohttp_session, make_response, apps_xml):
        """Independent queries on one client can run concurrently."""
        responses = {
            "http://192.168.1.17:8060/query/apps": apps_xml,
            "http://192.168.1.17:8060/query/active-app": "<active-app><app>Roku</app></active-app>",
        }
        mock_aiohttp_session.request = AsyncMock(side_effect=lambda method, url: make_response(responses[url]))

        apps, active = await asyncio.gather(mock_client.apps(), mock_client.active())

        assert len(apps) == 3
        assert active is None


class TestIcon:
    """Test icon download."""

    @pytest.mark.asyncio
    async def test_icon_saved_to_temp_file(self, mock_client, mock_aiohttp_session, make_response):
        response = make_response(
            headers={"Content-Type": "image/png"},
            chunks=[b"\x89PNG", b"rest-of-image"],
        )
        mock_aiohttp_session.request = AsyncMock(return_value=response)

        path = await mock_client.icon("12")

        try:
            assert path.endswith(".png")
            with open(path, "rb") as f:
                assert f.read() == b"\x89PNGrest-of-image"
        finally:
            os.remove(path)
        mock_aiohttp_session.request.assert_called_once_with("GET", "http://192.168.1.17:8060/query/icon/12")

    @pytest.mark.asyncio
    async def test_icon_jpeg_extension(self, mock_client, mock_aiohttp_session, make_response):
        response = make_response(headers={"Content-Type": "image/jpeg"}, chunks=[b"jpeg"])
        mock_aiohttp_session.request = AsyncMock(return_value=response)

        path = await mock_client.icon(837)

        try:
            assert path.endswith(".jpeg")
        finally:
            os.remove(path)

    @pytest.mark.asyncio
    async def test_icon_request_failed(self, mock_client, mock_aiohttp_session, make_error_response):
        mock_aiohttp_session.request = AsyncMock(return_value=make_error_response(404, "Not Found"))

        with patch("roku_client.api.query.tempfile.mkstemp") as mkstemp:
            with pytest.raises(RokuRequestFailedError):
                await mock_client.icon("999")

        mkstemp.assert_not_called()

    @pytest.mark.asyncio
    async def test_icon_not_an_image(self, mock_client, mock_aiohttp_session, make_response):
        response = make_response(b"<html/>", headers={"Content-Type": "text/html"})
        mock_aiohttp_session.request = AsyncMock(return_value=response)

        with pytest.raises(RokuProtocolError):
            await mock_client.icon("12")

    @pytest.mark.asyncio
    async def test_icon_interrupted_download_removes_file(
        self, mock_client, mock_aiohttp_session, make_response, monkeypatch, tmp_path
    ):
        response = make_response(headers={"Content-Type": "image/png"})

        async def broken_body(_size):
            yield b"partial"
            raise ClientPayloadError("Connection reset while reading body")

        response.content.iter_chunked = broken_body
        mock_aiohttp_session.request = AsyncMock(return_value=response)
        monkeypatch.setattr(tempfile, "tempdir", str(tmp_path))

        with pytest.raises(ClientPayloadError):
            await mock_client.icon("12")

        assert list(tmp_path.iterdir()) == []

    @pytest.mark.asyncio
    async def test_icon_filesystem_error_propagates(self, mock_client, mock_aiohttp_session, make_response):
        response = make_response(headers={"Content-Type": "image/png"}, chunks=[b"png"])
        mock_aiohttp_session.request = AsyncMock(return_value=response)

        with patch("roku_client.api.query.tempfile.mkstemp", side_effect=OSError("No space left on device")):
            with pytest.raises(OSError, match="No space left"):
                await mock_client.icon("12")
