"""Attributed geometry entity - the output of read and the input of write."""
import enum
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional

from shapely.geometry import mapping
from shapely.geometry.base import BaseGeometry

from osm_format.models.elements import Vertex


class EntityState(enum.Flag):
    """Mutation state used when writing entities back to OSM.

    A flag so that an entity can carry both UPDATE and DELETE; the writer
    gives DELETE precedence.
    """
    NONE = 0
    UPDATE = enum.auto()
    DELETE = enum.auto()


class GeometryKind(enum.Enum):
    """Geometry kinds the writer knows how to serialize."""
    POINT = 'point'
    LINE = 'line'
    POLYGON = 'polygon'


_KIND_BY_GEOM_TYPE = {
    'Point': GeometryKind.POINT,
    'LineString': GeometryKind.LINE,
    'LinearRing': GeometryKind.LINE,
    'Polygon': GeometryKind.POLYGON,
}


@dataclass
class Entity:
    """A shapely geometry carrying OSM identity and tags.

    Attributes:
        geometry: shapely geometry (Point, LineString, Polygon, MultiLineString,
            MultiPolygon or GeometryCollection)
        tags: OSM tags
        id: source id, ``None`` for entities that were never in a document
        kind: 'node', 'way' or 'relation'
        version: source version if known
        state: mutation state for write-back
        fid: feature id, e.g. 'way.42' or 'relation.7.3'
        vertices: source vertices of a line or of a polygon's exterior ring,
            parallel to the geometry coordinates
    """
    geometry: BaseGeometry
    tags: Dict[str, str] = field(default_factory=dict)
    id: Optional[int] = None
    kind: str = 'node'
    version: Optional[int] = None
    state: EntityState = EntityState.NONE
    fid: Optional[str] = None
    vertices: Optional[List[Vertex]] = None

    @property
    def geometry_kind(self) -> Optional[GeometryKind]:
        """Kind of the geometry, or None for multi-part and collections."""
        return _KIND_BY_GEOM_TYPE.get(self.geometry.geom_type)

    def copy(self, **changes: Any) -> 'Entity':
        """Return a copy with its own tag dict and any field overrides."""
        changes.setdefault('tags', dict(self.tags))
        if self.vertices is not None:
            changes.setdefault('vertices', list(self.vertices))
        return replace(self, **changes)

    def to_geojson_feature(self) -> Dict[str, Any]:
        """Convert to GeoJSON Feature.

        Returns:
            GeoJSON Feature dict
        """
        return {
            "type": "Feature",
            "id": self.fid,
            "geometry": mapping(self.geometry),
            "properties": {
                "id": self.id,
                "osm_type": self.kind,
                **self.tags
            }
        }
