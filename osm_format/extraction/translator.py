"""Translating an indexed document into entities (the read path)."""
from typing import Callable, List, Mapping

from loguru import logger
from shapely.geometry import Point

from osm_format.extraction.resolver import WayResolver
from osm_format.extraction.shapes import line_from, polygon_from
from osm_format.filters.tag_filter import TagFilter
from osm_format.models.elements import DocumentIndex, IndexedNode, IndexedWay
from osm_format.models.entity import Entity


class GeometryTranslator:
    """Turns a DocumentIndex into an ordered list of entities.

    Output order: relation entities, then way entities, then node entities,
    each in document order.
    """

    def __init__(self, tag_filter: TagFilter,
                 relation_builders: Mapping[str, Callable],
                 share_nodes: bool = False,
                 standalone_tag_threshold: int = 0):
        """Initialize translator.

        Args:
            tag_filter: Filter used for area detection
            relation_builders: Relation type -> builder function
            share_nodes: Ways reuse each node's own vertex
            standalone_tag_threshold: Used nodes with more tags than this are
                still output on their own when tag checking is enabled
        """
        self.tag_filter = tag_filter
        self.relation_builders = relation_builders
        self.share_nodes = share_nodes
        self.standalone_tag_threshold = standalone_tag_threshold

    def translate(self, index: DocumentIndex) -> List[Entity]:
        resolver = WayResolver(index, share_nodes=self.share_nodes)
        entities = []

        for relation in index.relations.values():
            builder = self.relation_builders.get(relation.relation_type)
            if builder is None:
                logger.debug("relation {}: no builder for type {!r}, skipped",
                             relation.id, relation.relation_type)
                continue
            entities.extend(builder(relation, resolver))

        for way in index.ways.values():
            if way.interesting:
                entities.append(self.way_entity(way, resolver))

        for node in index.nodes.values():
            if self.is_standalone(node):
                entities.append(self.node_entity(node))

        return entities

    def way_entity(self, way: IndexedWay, resolver: WayResolver) -> Entity:
        """Build a Polygon entity for an area, else a LineString entity."""
        vertices = resolver.vertices(way)
        if len(vertices) < len(way.node_refs):
            logger.debug("way {} references missing nodes, resolved to no geometry", way.id)

        # A ring needs at least four positions
        if self.tag_filter.is_area(way) and len(vertices) >= 4:
            geometry = polygon_from(vertices)
        else:
            geometry = line_from(vertices)

        return Entity(
            geometry=geometry,
            tags=dict(way.tags),
            id=way.id,
            kind='way',
            version=way.version,
            fid=f"way.{way.id}",
            vertices=vertices,
        )

    def is_standalone(self, node: IndexedNode) -> bool:
        """Check whether a node is output as its own entity.

        A node used as a way vertex is suppressed, unless tag checking is
        enabled and the node has more tags than the threshold.
        """
        if not node.used:
            return True
        if not self.tag_filter.check_tags:
            return False
        return len(node.tags) > self.standalone_tag_threshold

    @staticmethod
    def node_entity(node: IndexedNode) -> Entity:
        return Entity(
            geometry=Point(node.x, node.y),
            tags=dict(node.tags),
            id=node.id,
            kind='node',
            version=node.version,
            fid=f"node.{node.id}",
        )
