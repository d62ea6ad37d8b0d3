"""Indexed OSM element records.

These are the topological records built by the document indexer. They live
for a single read pass and are consumed by the relation builders and the
geometry translator.
"""
from dataclasses import dataclass, field
from typing import Dict, List, NamedTuple, Optional


class Vertex(NamedTuple):
    """A resolved way vertex.

    ``node_id`` stamps the source node so the writer can map the vertex back
    to a node record. Path assembly compares ``x``/``y`` only.
    """
    x: float
    y: float
    node_id: Optional[int] = None


@dataclass
class IndexedNode:
    """OSM node with (possibly reprojected) coordinates and tags."""
    id: int
    x: float
    y: float
    version: Optional[int] = None
    tags: Dict[str, str] = field(default_factory=dict)
    used: bool = False

    def __post_init__(self):
        self._vertex = Vertex(self.x, self.y, self.id)

    @property
    def vertex(self) -> Vertex:
        """The node's own vertex, shared between ways in node-sharing mode."""
        return self._vertex


@dataclass
class IndexedWay:
    """OSM way with unresolved node references.

    A closed way repeats its first node id as its last.
    """
    id: int
    node_refs: List[int] = field(default_factory=list)
    version: Optional[int] = None
    tags: Dict[str, str] = field(default_factory=dict)
    interesting: bool = True

    @property
    def is_closed(self) -> bool:
        """Check if the first and last node references are equal."""
        return bool(self.node_refs) and self.node_refs[0] == self.node_refs[-1]


@dataclass(frozen=True)
class MemberRef:
    """Reference from a relation to one of its members."""
    ref: int
    role: str = ''


@dataclass
class IndexedRelation:
    """OSM relation with members partitioned by member type.

    Each list keeps the document order of the members, which the relation
    builders replay when stitching paths.
    """
    id: int
    version: Optional[int] = None
    tags: Dict[str, str] = field(default_factory=dict)
    nodes: List[MemberRef] = field(default_factory=list)
    ways: List[MemberRef] = field(default_factory=list)
    relations: List[MemberRef] = field(default_factory=list)

    @property
    def relation_type(self) -> Optional[str]:
        return self.tags.get('type')

    @property
    def member_count(self) -> int:
        return len(self.nodes) + len(self.ways) + len(self.relations)


@dataclass
class DocumentIndex:
    """Lookup tables produced by one indexing pass, keyed by source id.

    Dicts keep insertion order, so iteration follows document order.
    """
    nodes: Dict[int, IndexedNode] = field(default_factory=dict)
    ways: Dict[int, IndexedWay] = field(default_factory=dict)
    relations: Dict[int, IndexedRelation] = field(default_factory=dict)

    @property
    def total_elements(self) -> int:
        return len(self.nodes) + len(self.ways) + len(self.relations)
