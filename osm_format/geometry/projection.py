"""Coordinate reprojection between the document CRS and the internal CRS."""
from typing import Optional, Tuple

from pyproj import Transformer
from pyproj.exceptions import CRSError

from osm_format.errors import ConfigError

# OSM coordinates are always longitude/latitude on WGS84
WGS84 = "EPSG:4326"


class Reprojector:
    """Transforms points between the external (document) and internal CRS.

    When no internal CRS is configured, or both are the same, points pass
    through unchanged.
    """

    def __init__(self, internal: Optional[str] = None, external: str = WGS84):
        self.internal = internal
        self.external = external
        self._to_internal = None
        self._to_external = None
        if internal and external and internal != external:
            try:
                self._to_internal = Transformer.from_crs(external, internal, always_xy=True)
                self._to_external = Transformer.from_crs(internal, external, always_xy=True)
            except CRSError as e:
                raise ConfigError(f"Invalid projection {external} -> {internal}: {e}") from e

    @property
    def active(self) -> bool:
        return self._to_internal is not None

    def to_internal(self, x: float, y: float) -> Tuple[float, float]:
        """Document (lon, lat) to internal coordinates."""
        if self._to_internal is None:
            return x, y
        return self._to_internal.transform(x, y)

    def to_external(self, x: float, y: float) -> Tuple[float, float]:
        """Internal coordinates back to document (lon, lat)."""
        if self._to_external is None:
            return x, y
        return self._to_external.transform(x, y)
