"""Document indexer.

Scans an OSM element tree once per element kind and builds id-keyed lookup
tables of nodes, ways and relations. References between the tables are not
checked here; consumers resolve them lazily and tolerate missing targets.
"""
import time
import xml.etree.ElementTree as ET
from typing import Dict, List, Optional

from loguru import logger

from osm_format.errors import OSMParseError
from osm_format.filters.tag_filter import TagFilter
from osm_format.geometry.projection import Reprojector
from osm_format.models.elements import (
    DocumentIndex, IndexedNode, IndexedRelation, IndexedWay, MemberRef
)


def _parse_int(element: ET.Element, attribute: str,
               required: bool = True) -> Optional[int]:
    value = element.get(attribute)
    if value is None:
        if required:
            raise OSMParseError(
                f"<{element.tag}> is missing required attribute '{attribute}'",
                element.tag, attribute
            )
        return None
    try:
        return int(value)
    except ValueError:
        raise OSMParseError(
            f"<{element.tag}> has non-numeric {attribute}={value!r}",
            element.tag, attribute
        ) from None


def _parse_float(element: ET.Element, attribute: str) -> float:
    value = element.get(attribute)
    try:
        return float(value)
    except (TypeError, ValueError):
        raise OSMParseError(
            f"<{element.tag} id={element.get('id')!r}> has invalid {attribute}={value!r}",
            element.tag, attribute
        ) from None


class DocumentIndexer:
    """Builds a DocumentIndex from an OSM element tree."""

    def __init__(self, tag_filter: TagFilter,
                 reprojector: Optional[Reprojector] = None):
        """Initialize indexer.

        Args:
            tag_filter: Filter applied to the tags of every element
            reprojector: Optional transform from document to internal CRS
        """
        self.tag_filter = tag_filter
        self.reprojector = reprojector or Reprojector()

    def index(self, root: ET.Element) -> DocumentIndex:
        """Index all nodes, ways and relations of a document.

        Args:
            root: Root ``osm`` element

        Returns:
            DocumentIndex in document order

        Raises:
            OSMParseError: On non-numeric ids, versions, refs or coordinates
        """
        start_time = time.time()
        index = DocumentIndex(
            nodes=self.get_nodes(root),
            ways=self.get_ways(root),
            relations=self.get_relations(root),
        )
        logger.debug(
            "Indexed {} nodes, {} ways, {} relations in {:.3f}s",
            len(index.nodes), len(index.ways), len(index.relations),
            time.time() - start_time
        )
        return index

    def extract_tags(self, element: ET.Element):
        """Return (tags, interesting) for an element's ``tag`` children."""
        return self.tag_filter.filter(
            (tag.get('k'), tag.get('v')) for tag in element.iter('tag')
        )

    def get_nodes(self, root: ET.Element) -> Dict[int, IndexedNode]:
        nodes = {}
        for element in root.iter('node'):
            node_id = _parse_int(element, 'id')
            x, y = self.reprojector.to_internal(
                _parse_float(element, 'lon'), _parse_float(element, 'lat')
            )
            tags, _ = self.extract_tags(element)
            nodes[node_id] = IndexedNode(
                id=node_id,
                x=x,
                y=y,
                version=_parse_int(element, 'version', required=False),
                tags=tags,
            )
        return nodes

    def get_ways(self, root: ET.Element) -> Dict[int, IndexedWay]:
        ways = {}
        for element in root.iter('way'):
            way_id = _parse_int(element, 'id')
            tags, interesting = self.extract_tags(element)
            ways[way_id] = IndexedWay(
                id=way_id,
                node_refs=[_parse_int(nd, 'ref') for nd in element.iter('nd')],
                version=_parse_int(element, 'version', required=False),
                tags=tags,
                # Without tag checking every way is output
                interesting=interesting if self.tag_filter.check_tags else True,
            )
        return ways

    def get_relations(self, root: ET.Element) -> Dict[int, IndexedRelation]:
        relations = {}
        for element in root.iter('relation'):
            relation_id = _parse_int(element, 'id')
            tags, _ = self.extract_tags(element)
            relation = IndexedRelation(
                id=relation_id,
                version=_parse_int(element, 'version', required=False),
                tags=tags,
            )
            members_by_type: Dict[str, List[MemberRef]] = {
                'node': relation.nodes,
                'way': relation.ways,
                'relation': relation.relations,
            }
            for member in element.iter('member'):
                target = members_by_type.get(member.get('type'))
                if target is None:
                    continue
                target.append(MemberRef(
                    ref=_parse_int(member, 'ref'),
                    role=member.get('role') or '',
                ))
            relations[relation_id] = relation
        return relations
