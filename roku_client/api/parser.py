"""XML decoding and response mapping for Roku ECP.

The device answers queries with small XML documents. ``parse_xml`` decodes a
payload into :class:`~roku_client.models.XmlElement` trees; the remaining
functions are pure mappings from that tree to domain records and never touch
the network.
"""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET

from ..exceptions import RokuProtocolError
from ..models import App, DeviceInfo, XmlElement

__all__ = [
    "camel_case",
    "parse_active_app",
    "parse_app",
    "parse_apps",
    "parse_device_info",
    "parse_xml",
]

# Word separators in device-info keys, plus lower->upper and digit->letter boundaries.
_WORD_SPLIT = re.compile(r"[-_\s]+|(?<=[a-z0-9])(?=[A-Z])|(?<=\d)(?=[a-z])")


def _convert(element: ET.Element) -> XmlElement:
    return XmlElement(
        tag=element.tag,
        attributes=dict(element.attrib),
        children=[_convert(child) for child in element],
        text=(element.text or "").strip(),
    )


def parse_xml(payload: str | bytes, endpoint: str | None = None) -> XmlElement:
    """Decode an XML payload into an ``XmlElement`` tree.

    Args:
        payload: Raw response body.
        endpoint: URL the payload came from, for error context.

    Returns:
        The root element.

    Raises:
        RokuProtocolError: If the payload is not well-formed XML.
    """
    try:
        root = ET.fromstring(payload)
    except ET.ParseError as err:
        raise RokuProtocolError(f"Malformed XML response: {err}", endpoint=endpoint) from err
    return _convert(root)


def camel_case(key: str) -> str:
    """Convert a wire key to camelCase (``user-device-name`` -> ``userDeviceName``)."""
    words = [word for word in _WORD_SPLIT.split(key) if word]
    if not words:
        return ""
    first, *rest = words
    return first.lower() + "".join(word[:1].upper() + word[1:].lower() for word in rest)


def parse_app(element: XmlElement, endpoint: str | None = None) -> App:
    """Map an ``<app>`` element to an ``App`` record.

    Raises:
        RokuProtocolError: If the element has no ``id`` attribute.
    """
    app_id = element.attributes.get("id")
    if not app_id:
        raise RokuProtocolError(f"App element without id: {element.text!r}", endpoint=endpoint)
    return App(
        id=app_id,
        name=element.text,
        type=element.attributes.get("type"),
        version=element.attributes.get("version"),
    )


def parse_apps(root: XmlElement, endpoint: str | None = None) -> list[App]:
    """Map an ``<apps>`` document to a list of apps in document order."""
    return [parse_app(app, endpoint=endpoint) for app in root.find_all("app")]


def parse_active_app(root: XmlElement, endpoint: str | None = None) -> App | None:
    """Map an ``<active-app>`` document to the foreground app.

    Returns:
        The active app, or None when the home screen is displayed (the sole
        ``<app>`` element then carries no ``id`` attribute).

    Raises:
        RokuProtocolError: If the document does not hold exactly one ``<app>``.
    """
    apps = root.find_all("app")
    if len(apps) != 1:
        raise RokuProtocolError(f"Expected 1 active app but received {len(apps)}", endpoint=endpoint)

    active = apps[0]
    if not active.attributes.get("id"):
        return None
    return parse_app(active, endpoint=endpoint)


def parse_device_info(root: XmlElement) -> DeviceInfo:
    """Flatten a ``<device-info>`` document into a camel-cased key/value map.

    Responses vary between devices and firmware, so every child is kept.
    """
    return {camel_case(child.tag): child.text for child in root.children}
