"""OSM XML serialization of entities (the write path).

Entities are written in reverse order so that the node records of a way land
before the way itself. Ids are kept for entities that came from a document
and allocated as -1, -2, ... for new ones. All bookkeeping for one document
lives in a WriteContext created per write() call.
"""
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple, Union

from loguru import logger

from osm_format import __version__
from osm_format.geometry.projection import Reprojector
from osm_format.models.elements import Vertex
from osm_format.models.entity import Entity, EntityState, GeometryKind

OSM_API_VERSION = "0.6"
GENERATOR = f"osmformat {__version__}"


@dataclass
class WriteContext:
    """Per-document state of one write() call.

    Attributes:
        next_id: Next synthetic id, counts down from -1
        created_nodes: Node records by id, for nodes shared between ways
        new_vertex_ids: Ids given to vertices without a source node, by
            coordinate
    """
    next_id: int = -1
    created_nodes: Dict[int, ET.Element] = field(default_factory=dict)
    new_vertex_ids: Dict[Tuple[float, float], int] = field(default_factory=dict)

    def allocate_id(self) -> int:
        osm_id = self.next_id
        self.next_id -= 1
        return osm_id


def source_id(osm_id: Optional[int]) -> Optional[int]:
    """Return the id if it refers to an existing OSM element."""
    if osm_id is not None and osm_id > 0:
        return osm_id
    return None


def action_for(state: EntityState) -> Optional[str]:
    """Map a mutation state to the OSM ``action`` attribute.

    DELETE takes precedence when both flags are set.
    """
    if state & EntityState.DELETE:
        return 'delete'
    if state & EntityState.UPDATE:
        return 'modify'
    return None


class OSMXMLWriter:
    """Serializes entities to an OSM XML document."""

    def __init__(self, reprojector: Optional[Reprojector] = None):
        """Initialize writer.

        Args:
            reprojector: Transform from internal CRS back to lon/lat
        """
        self.reprojector = reprojector or Reprojector()
        self._builders = {
            GeometryKind.POINT: self.create_point_nodes,
            GeometryKind.LINE: self.create_line_nodes,
            GeometryKind.POLYGON: self.create_polygon_nodes,
        }

    def write(self, entities: Union[Entity, Iterable[Entity]]) -> str:
        """Serialize entities to OSM XML text.

        Args:
            entities: An entity or a sequence of entities

        Returns:
            OSM XML document as a string
        """
        root = self.build_tree(entities)
        ET.indent(root, space='  ')
        body = ET.tostring(root, encoding='unicode')
        return '<?xml version="1.0" encoding="UTF-8"?>\n' + body + '\n'

    def build_tree(self, entities: Union[Entity, Iterable[Entity]]) -> ET.Element:
        """Serialize entities into an ``osm`` root element."""
        if isinstance(entities, Entity):
            entities = [entities]
        entities = list(entities)

        context = WriteContext()
        root = ET.Element('osm', {'version': OSM_API_VERSION, 'generator': GENERATOR})
        for entity in reversed(entities):
            for element in self.create_feature_nodes(entity, context):
                root.append(element)

        logger.debug("Serialized {} entities into {} elements ({} new ids)",
                     len(entities), len(root), -1 - context.next_id)
        return root

    def create_feature_nodes(self, entity: Entity,
                             context: WriteContext) -> List[ET.Element]:
        """Return the new elements needed to serialize one entity."""
        builder = self._builders.get(entity.geometry_kind)
        if builder is None:
            logger.debug("No OSM serialization for {} geometry of {}, skipped",
                         entity.geometry.geom_type, entity.fid or entity.id)
            return []
        if entity.geometry.is_empty:
            logger.debug("Empty geometry of {}, skipped", entity.fid or entity.id)
            return []
        return builder(entity, context)

    def create_point_nodes(self, entity: Entity,
                           context: WriteContext) -> List[ET.Element]:
        point = entity.geometry
        node_id = entity.id if entity.kind == 'node' else None
        element, created = self.node_record(
            Vertex(point.x, point.y, node_id), context,
            tags=entity.tags, version=entity.version, state=entity.state,
            dedupe_new=False,
        )
        return [element] if created else []

    def create_line_nodes(self, entity: Entity, context: WriteContext,
                          tags: Optional[Dict[str, str]] = None) -> List[ET.Element]:
        elements = []
        # Only way entities own a way id; relation lines get a new one
        way_id = (source_id(entity.id) if entity.kind == 'way' else None) or context.allocate_id()
        way = ET.Element('way', {'id': str(way_id)})
        if entity.version:
            way.set('version', str(entity.version))

        for vertex in self.line_vertices(entity):
            node, created = self.node_record(vertex, context)
            if created:
                elements.append(node)
            self.set_state(entity.state, node)
            ET.SubElement(way, 'nd', {'ref': node.get('id')})

        self.serialize_tags(entity.tags if tags is None else tags, way)
        self.set_state(entity.state, way)
        elements.append(way)
        return elements

    def create_polygon_nodes(self, entity: Entity,
                             context: WriteContext) -> List[ET.Element]:
        # Only the exterior ring is written
        ring = entity.copy(geometry=entity.geometry.exterior)
        return self.create_line_nodes(ring, context, tags={'area': 'yes', **entity.tags})

    @staticmethod
    def line_vertices(entity: Entity) -> List[Vertex]:
        """Vertices of a line entity, with source node ids when known.

        Positions always come from the geometry; ``entity.vertices`` only
        contributes node ids, and only when it matches the geometry length.
        """
        coords = list(entity.geometry.coords)
        if entity.vertices is not None and len(entity.vertices) == len(coords):
            return [Vertex(x, y, source.node_id)
                    for (x, y, *_), source in zip(coords, entity.vertices)]
        return [Vertex(x, y) for x, y, *_ in coords]

    def node_record(self, vertex: Vertex, context: WriteContext,
                    tags: Optional[Dict[str, str]] = None,
                    version: Optional[int] = None,
                    state: EntityState = EntityState.NONE,
                    dedupe_new: bool = True) -> Tuple[ET.Element, bool]:
        """Get or create the node record for a vertex.

        A node with a source id is created once per document; later uses get
        the existing record unchanged. Vertices without a source id get a new
        id, shared between vertices at the same position when ``dedupe_new``.

        Returns:
            Tuple of (element, created)
        """
        node_id = source_id(vertex.node_id)
        if node_id is None:
            key = (vertex.x, vertex.y)
            if dedupe_new and key in context.new_vertex_ids:
                node_id = context.new_vertex_ids[key]
            else:
                node_id = context.allocate_id()
                if dedupe_new:
                    context.new_vertex_ids[key] = node_id

        existing = context.created_nodes.get(node_id)
        if existing is not None:
            return existing, False

        lon, lat = self.reprojector.to_external(vertex.x, vertex.y)
        node = ET.Element('node', {
            'id': str(node_id),
            'lon': repr(float(lon)),
            'lat': repr(float(lat)),
        })
        if version:
            node.set('version', str(version))
        if tags:
            self.serialize_tags(tags, node)
        self.set_state(state, node)
        context.created_nodes[node_id] = node
        return node, True

    @staticmethod
    def serialize_tags(tags: Dict[str, str], element: ET.Element) -> None:
        for key, value in tags.items():
            ET.SubElement(element, 'tag', {'k': str(key), 'v': str(value)})

    @staticmethod
    def set_state(state: EntityState, element: ET.Element) -> None:
        action = action_for(state)
        if action:
            element.set('action', action)
