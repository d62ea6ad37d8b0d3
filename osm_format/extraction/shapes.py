"""shapely constructors for vertex sequences."""
from typing import List, Sequence, Tuple

from shapely.geometry import LineString, Polygon

from osm_format.models.elements import Vertex


def coords_of(vertices: Sequence[Vertex]) -> List[Tuple[float, float]]:
    return [(v.x, v.y) for v in vertices]


def can_form_ring(vertices: Sequence[Vertex]) -> bool:
    """Check if vertices span at least three distinct points."""
    return len(set(coords_of(vertices))) >= 3


def line_from(vertices: Sequence[Vertex]) -> LineString:
    """LineString through the vertices; empty below two vertices."""
    if len(vertices) < 2:
        return LineString()
    return LineString(coords_of(vertices))


def polygon_from(vertices: Sequence[Vertex]) -> Polygon:
    """Single-ring polygon; the ring is closed implicitly if needed."""
    return Polygon(coords_of(vertices))
