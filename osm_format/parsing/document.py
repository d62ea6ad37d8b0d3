"""Turning raw OSM markup into an element tree."""
import xml.etree.ElementTree as ET
from typing import Union

from osm_format.errors import OSMParseError

Document = Union[str, bytes, ET.Element, ET.ElementTree]


def to_element(document: Document) -> ET.Element:
    """Return the root element of an OSM document.

    Args:
        document: Markup text/bytes, a parsed root element or an ElementTree

    Returns:
        Root element

    Raises:
        OSMParseError: If the markup is not well-formed XML
    """
    if isinstance(document, ET.ElementTree):
        return document.getroot()
    if isinstance(document, ET.Element):
        return document
    if isinstance(document, (str, bytes)):
        try:
            return ET.fromstring(document)
        except ET.ParseError as e:
            raise OSMParseError(f"Malformed OSM document: {e}") from e
    raise TypeError(f"Cannot read OSM document from {type(document).__name__}")
