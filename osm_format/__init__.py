"""osm_format - OSM XML reader and writer.

Converts topological OSM documents (nodes, ways and relations referencing
each other by id) into shapely-based entities, assembling multipolygons and
routes from relations, and serializes entities back into OSM XML.
"""

__version__ = "1.0.0"

# Data models
from osm_format.models.elements import (
    Vertex, IndexedNode, IndexedWay, IndexedRelation, MemberRef, DocumentIndex
)
from osm_format.models.entity import Entity, EntityState, GeometryKind

# Configuration and errors
from osm_format.config import FormatConfig
from osm_format.errors import OSMFormatError, OSMParseError, ConfigError

# Building blocks
from osm_format.filters.tag_filter import TagFilter
from osm_format.geometry.paths import PathMerge, concatenate
from osm_format.parsing.indexer import DocumentIndexer
from osm_format.extraction.relations import (
    multipolygon_builder, route_builder, route_with_roles_builder,
    generic_builder, STANDARD_RELATION_BUILDERS
)
from osm_format.extraction.translator import GeometryTranslator
from osm_format.export.xml_writer import OSMXMLWriter

# Main API
from osm_format.api import OSMFormat

__all__ = [
    # Version
    '__version__',
    # Models
    'Vertex', 'IndexedNode', 'IndexedWay', 'IndexedRelation', 'MemberRef',
    'DocumentIndex', 'Entity', 'EntityState', 'GeometryKind',
    # Config / errors
    'FormatConfig', 'OSMFormatError', 'OSMParseError', 'ConfigError',
    # Building blocks
    'TagFilter', 'PathMerge', 'concatenate', 'DocumentIndexer',
    'multipolygon_builder', 'route_builder', 'route_with_roles_builder',
    'generic_builder', 'STANDARD_RELATION_BUILDERS',
    'GeometryTranslator', 'OSMXMLWriter',
    # API
    'OSMFormat',
]
