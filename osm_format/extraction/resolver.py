"""Resolving way node references into vertices."""
from typing import List, Optional

from osm_format.models.elements import DocumentIndex, IndexedNode, IndexedWay, Vertex


class WayResolver:
    """Resolves ways of one DocumentIndex into vertex sequences.

    Resolving a way marks each of its nodes as used. Created per read call,
    together with the index it wraps.
    """

    def __init__(self, index: DocumentIndex, share_nodes: bool = False):
        """Initialize resolver.

        Args:
            index: Indexed document
            share_nodes: Return each node's own vertex instead of a copy
        """
        self.index = index
        self.share_nodes = share_nodes

    def node(self, node_id: int) -> Optional[IndexedNode]:
        return self.index.nodes.get(node_id)

    def way(self, way_id: int) -> Optional[IndexedWay]:
        return self.index.ways.get(way_id)

    def vertices(self, way: Optional[IndexedWay]) -> List[Vertex]:
        """Resolve a way to its vertices.

        Args:
            way: Indexed way, or None for a member outside the document

        Returns:
            Vertices in way order; empty if the way is missing or references a
            node that is not in the document
        """
        if way is None:
            return []

        nodes = [self.index.nodes.get(ref) for ref in way.node_refs]
        if any(node is None for node in nodes):
            return []

        vertices = []
        for node in nodes:
            node.used = True
            if self.share_nodes:
                vertices.append(node.vertex)
            else:
                vertices.append(Vertex(node.x, node.y, node.id))
        return vertices

    def vertices_for(self, way_id: int) -> List[Vertex]:
        """Resolve a way by id; see vertices()."""
        return self.vertices(self.way(way_id))
