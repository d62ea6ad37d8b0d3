"""Relation geometry builders.

A builder turns one indexed relation into zero or more entities. Builders are
looked up by the relation's ``type`` tag through the ``relation_builders``
mapping of FormatConfig; relations of other types produce nothing, and their
members are still output on their own by the translator.

Every builder has the signature ``builder(relation, resolver) -> List[Entity]``.
"""
from types import MappingProxyType
from typing import Iterator, List, Optional, Tuple

from loguru import logger
from shapely.geometry import (
    GeometryCollection, MultiLineString, MultiPolygon, Point, Polygon
)

from osm_format.extraction.resolver import WayResolver
from osm_format.extraction.shapes import (
    can_form_ring, coords_of, line_from, polygon_from
)
from osm_format.geometry.paths import concatenate
from osm_format.models.elements import IndexedRelation, Vertex
from osm_format.models.entity import Entity

INNER_ROLES = frozenset({'inner', 'enclave'})


def _relation_entity(relation: IndexedRelation, geometry,
                     fid: Optional[str] = None, **extra_tags: str) -> Entity:
    return Entity(
        geometry=geometry,
        tags={**relation.tags, **extra_tags},
        id=relation.id,
        kind='relation',
        version=relation.version,
        fid=fid or f"relation.{relation.id}",
    )


def iter_role_chains(relation: IndexedRelation, resolver: WayResolver
                     ) -> Iterator[Tuple[Optional[int], str, List[Vertex]]]:
    """Stitch consecutive way members with the same role into chains.

    Members are taken in document order. A member joins the current chain
    when it has the chain's role and shares an endpoint with it; otherwise
    the chain is finished and the member starts a new one. A chain whose
    role is still empty takes the role of the next member. Members that
    resolve to no vertices are skipped.

    Yields:
        (member_position, role, chain) for each finished chain, where
        member_position is the index of the member that closed it. The last
        chain is yielded with position None and may be empty.
    """
    chain: List[Vertex] = []
    chain_role = ''

    for position, member in enumerate(relation.ways):
        vertices = resolver.vertices_for(member.ref)
        if not vertices:
            logger.debug("relation {}: way member {} has no geometry, skipped",
                         relation.id, member.ref)
            continue

        if chain_role == '':
            chain_role = member.role
        if chain_role == member.role:
            result = concatenate(chain, vertices)
            if result.ok:
                chain = result.merged
                continue

        yield position, chain_role, chain
        chain = vertices
        chain_role = member.role

    yield None, chain_role, chain


def multipolygon_builder(relation: IndexedRelation,
                         resolver: WayResolver) -> List[Entity]:
    """Build one MultiPolygon entity from a multipolygon/boundary relation.

    Chains with role 'inner' or 'enclave' become holes, every other chain an
    outer ring. Each outer ring becomes a polygon holding every inner ring
    whose centroid lies inside it or on its boundary; inner rings inside no
    outer ring are dropped.
    """
    outer_rings: List[List[Vertex]] = []
    inner_rings: List[List[Vertex]] = []

    for _, role, chain in iter_role_chains(relation, resolver):
        if not chain:
            continue
        if not can_form_ring(chain):
            logger.debug("relation {}: {}-point '{}' chain cannot form a ring, dropped",
                         relation.id, len(chain), role)
            continue
        if role in INNER_ROLES:
            inner_rings.append(chain)
        else:
            outer_rings.append(chain)

    inner_shapes = [(coords_of(ring), polygon_from(ring).centroid) for ring in inner_rings]
    placed = set()
    polygons = []
    for outer in outer_rings:
        outer_shape = polygon_from(outer)
        holes = []
        for i, (inner_coords, centroid) in enumerate(inner_shapes):
            if outer_shape.covers(centroid):
                holes.append(inner_coords)
                placed.add(i)
        polygons.append(Polygon(coords_of(outer), holes))

    dropped = len(inner_shapes) - len(placed)
    if dropped:
        logger.debug("relation {}: {} inner ring(s) outside every outer ring, dropped",
                     relation.id, dropped)

    return [_relation_entity(relation, MultiPolygon(polygons))]


def _member_lines(relation: IndexedRelation, resolver: WayResolver):
    lines = []
    for member in relation.ways:
        vertices = resolver.vertices_for(member.ref)
        if len(vertices) < 2:
            continue
        lines.append(line_from(vertices))
    return lines


def route_builder(relation: IndexedRelation,
                  resolver: WayResolver) -> List[Entity]:
    """Build one MultiLineString entity from all way members, ignoring roles."""
    return [_relation_entity(relation, MultiLineString(_member_lines(relation, resolver)))]


def route_with_roles_builder(relation: IndexedRelation,
                             resolver: WayResolver) -> List[Entity]:
    """Build one LineString entity per chain of same-role way members.

    Each entity carries the relation tags plus ``role`` when the chain has
    one. Chains finished inside the member loop get the fid
    ``relation.<id>.<member position>``; the last chain, which is always
    emitted, gets ``relation.<id>``.
    """
    entities = []
    for position, role, chain in iter_role_chains(relation, resolver):
        fid = None if position is None else f"relation.{relation.id}.{position}"
        extra = {'role': role} if role else {}
        entity = _relation_entity(relation, line_from(chain), fid=fid, **extra)
        entity.vertices = list(chain)
        entities.append(entity)
    return entities


def generic_builder(relation: IndexedRelation,
                    resolver: WayResolver) -> List[Entity]:
    """Build one GeometryCollection of member lines and member node points."""
    geometries = _member_lines(relation, resolver)
    for member in relation.nodes:
        node = resolver.node(member.ref)
        if node is None:
            continue
        geometries.append(Point(node.x, node.y))
    return [_relation_entity(relation, GeometryCollection(geometries))]


BUILDERS_BY_NAME = MappingProxyType({
    'multipolygon': multipolygon_builder,
    'route': route_builder,
    'route_with_roles': route_with_roles_builder,
    'generic': generic_builder,
})

STANDARD_RELATION_BUILDERS = MappingProxyType({
    'multipolygon': multipolygon_builder,
    'boundary': multipolygon_builder,
    'route': route_builder,
})
