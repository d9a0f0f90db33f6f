"""Data models for Roku ECP responses.

``App`` is a Pydantic model so records coming off the wire are validated and
immutable. ``XmlElement`` is the plain intermediate tree produced by the XML
decoder; mapping functions in :mod:`roku_client.api.parser` turn it into
domain records.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict

__all__ = ["App", "DeviceInfo", "XmlElement"]

# Device info has no fixed schema: camel-cased field name -> text value.
DeviceInfo = dict[str, str]


class App(BaseModel):
    """An application (channel) installed on the device.

    Attributes:
        id: The id used by the launch and icon endpoints.
        name: Display name of the app.
        type: App type reported by the device (``appl``, ``tvin``, ``menu``...).
        version: App version string.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str = ""
    type: str | None = None
    version: str | None = None


@dataclass
class XmlElement:
    """One decoded XML element: tag, attributes, children and text."""

    tag: str
    attributes: dict[str, str] = field(default_factory=dict)
    children: list[XmlElement] = field(default_factory=list)
    text: str = ""

    def find_all(self, tag: str) -> list[XmlElement]:
        """Return direct children with the given tag, in document order."""
        return [child for child in self.children if child.tag == tag]
