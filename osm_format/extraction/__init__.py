"""Building entities from an indexed OSM document."""

from osm_format.extraction.resolver import WayResolver
from osm_format.extraction.relations import (
    BUILDERS_BY_NAME, STANDARD_RELATION_BUILDERS, generic_builder,
    iter_role_chains, multipolygon_builder, route_builder,
    route_with_roles_builder,
)
from osm_format.extraction.translator import GeometryTranslator

__all__ = [
    'WayResolver', 'GeometryTranslator', 'iter_role_chains',
    'multipolygon_builder', 'route_builder', 'route_with_roles_builder',
    'generic_builder', 'BUILDERS_BY_NAME', 'STANDARD_RELATION_BUILDERS',
]
