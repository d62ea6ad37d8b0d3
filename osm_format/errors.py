"""Exception types raised by osm_format."""


class OSMFormatError(Exception):
    """Base class for all osm_format errors."""


class OSMParseError(OSMFormatError, ValueError):
    """Raised when an OSM document cannot be read.

    Covers malformed markup as well as elements whose numeric attributes
    (id, version, ref, lat, lon) do not parse.
    """

    def __init__(self, message: str, element_type: str = None,
                 attribute: str = None):
        super().__init__(message)
        self.element_type = element_type
        self.attribute = attribute


class ConfigError(OSMFormatError, ValueError):
    """Raised for an invalid FormatConfig (unknown builder, bad projection)."""
