"""Data models for indexed OSM elements and output entities."""

from osm_format.models.elements import (
    Vertex, IndexedNode, IndexedWay, IndexedRelation, MemberRef, DocumentIndex
)
from osm_format.models.entity import Entity, EntityState, GeometryKind

__all__ = [
    'Vertex', 'IndexedNode', 'IndexedWay', 'IndexedRelation', 'MemberRef',
    'DocumentIndex', 'Entity', 'EntityState', 'GeometryKind',
]
