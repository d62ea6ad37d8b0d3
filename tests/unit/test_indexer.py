"""Tests for document parsing and indexing."""
import xml.etree.ElementTree as ET

import pytest

from osm_format.errors import OSMParseError
from osm_format.filters.tag_filter import TagFilter
from osm_format.geometry.projection import Reprojector
from osm_format.models.elements import MemberRef
from osm_format.parsing.document import to_element
from osm_format.parsing.indexer import DocumentIndexer


class TestToElement:
    """Tests for to_element()."""

    def test_from_text(self, simple_osm):
        assert to_element(simple_osm).tag == 'osm'

    def test_from_bytes(self, simple_osm):
        assert to_element(simple_osm.encode('utf-8')).tag == 'osm'

    def test_from_element_and_tree(self, simple_osm):
        root = ET.fromstring(simple_osm)
        assert to_element(root) is root
        assert to_element(ET.ElementTree(root)) is root

    def test_malformed_markup(self):
        with pytest.raises(OSMParseError):
            to_element('<osm><node id="1"></osm>')

    def test_unsupported_type(self):
        with pytest.raises(TypeError):
            to_element(42)


class TestDocumentIndexer:
    """Tests for DocumentIndexer.index()."""

    def test_tables_in_document_order(self, indexer, simple_osm):
        index = indexer.index(to_element(simple_osm))
        assert list(index.nodes) == [1, 2, 3, 4, 5]
        assert list(index.ways) == [10, 11]
        assert index.relations == {}
        assert index.total_elements == 7

    def test_node_fields(self, indexer, simple_osm):
        index = indexer.index(to_element(simple_osm))
        node = index.nodes[2]
        assert (node.x, node.y) == (1.0, 0.0)
        assert node.version == 1
        assert node.used is False
        assert index.nodes[3].version is None
        assert index.nodes[4].tags == {'name': 'Corner'}

    def test_way_fields(self, indexer, simple_osm):
        index = indexer.index(to_element(simple_osm))
        way = index.ways[10]
        assert way.node_refs == [1, 2, 3, 4, 1]
        assert way.version == 3
        assert way.is_closed
        assert way.interesting is True
        assert index.ways[11].tags == {'highway': 'residential', 'created_by': 'JOSM'}

    def test_tag_checking_filters_tags_and_interest(self, simple_osm):
        indexer = DocumentIndexer(TagFilter(check_tags=True))
        doc = simple_osm.replace(
            '<tag k="highway" v="residential"/>', '<tag k="source" v="bing"/>'
        )
        index = indexer.index(to_element(doc))
        assert index.ways[11].tags == {}
        assert index.ways[11].interesting is False
        assert index.ways[10].interesting is True

    def test_relation_members_partitioned_in_order(self, indexer, route_osm):
        index = indexer.index(to_element(route_osm))
        relation = index.relations[200]
        assert relation.ways == [
            MemberRef(30, 'forward'), MemberRef(31, 'forward'),
            MemberRef(32, 'backward'), MemberRef(888, 'forward'),
        ]
        assert relation.nodes == [MemberRef(5, 'stop'), MemberRef(999, 'stop')]
        assert relation.relations == []
        assert relation.relation_type == 'route'
        assert relation.member_count == 6

    def test_missing_role_and_unknown_member_type(self, indexer):
        doc = '''<osm>
          <relation id="1">
            <member type="way" ref="5"/>
            <member type="changeset" ref="6" role="x"/>
            <member type="relation" ref="7" role="subarea"/>
          </relation>
        </osm>'''
        relation = indexer.index(to_element(doc)).relations[1]
        assert relation.ways == [MemberRef(5, '')]
        assert relation.relations == [MemberRef(7, 'subarea')]
        assert relation.member_count == 2

    def test_dangling_references_are_kept(self, indexer):
        doc = '<osm><way id="1"><nd ref="404"/></way></osm>'
        index = indexer.index(to_element(doc))
        assert index.ways[1].node_refs == [404]
        assert index.nodes == {}

    @pytest.mark.parametrize('doc, attribute', [
        ('<osm><node id="abc" lat="0" lon="0"/></osm>', 'id'),
        ('<osm><node id="1" lat="0" lon="0" version="v2"/></osm>', 'version'),
        ('<osm><node id="1" lat="north" lon="0"/></osm>', 'lat'),
        ('<osm><node id="1" lon="0"/></osm>', 'lat'),
        ('<osm><way id="1"><nd ref="x"/></way></osm>', 'ref'),
        ('<osm><relation id="1.5"/></osm>', 'id'),
        ('<osm><way/></osm>', 'id'),
    ])
    def test_malformed_numbers_raise(self, indexer, doc, attribute):
        with pytest.raises(OSMParseError) as exc_info:
            indexer.index(to_element(doc))
        assert exc_info.value.attribute == attribute

    def test_reprojection(self):
        indexer = DocumentIndexer(TagFilter(), Reprojector(internal='EPSG:3857'))
        index = indexer.index(to_element('<osm><node id="1" lat="0" lon="10"/></osm>'))
        node = index.nodes[1]
        assert node.x == pytest.approx(1113194.9, abs=0.1)
        assert node.y == pytest.approx(0.0, abs=1e-6)
