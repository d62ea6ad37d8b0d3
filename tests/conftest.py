"""Pytest fixtures for osmformat tests."""
import pytest


SIMPLE_OSM = '''<?xml version="1.0" encoding="UTF-8"?>
<osm version="0.6">
  <node id="1" lat="0.0" lon="0.0" version="2"/>
  <node id="2" lat="0.0" lon="1.0" version="1"/>
  <node id="3" lat="1.0" lon="1.0"/>
  <node id="4" lat="1.0" lon="0.0">
    <tag k="name" v="Corner"/>
  </node>
  <node id="5" lat="5.0" lon="5.0">
    <tag k="amenity" v="cafe"/>
  </node>
  <way id="10" version="3">
    <nd ref="1"/>
    <nd ref="2"/>
    <nd ref="3"/>
    <nd ref="4"/>
    <nd ref="1"/>
    <tag k="building" v="yes"/>
  </way>
  <way id="11">
    <nd ref="2"/>
    <nd ref="3"/>
    <tag k="highway" v="residential"/>
    <tag k="created_by" v="JOSM"/>
  </way>
</osm>'''


# Square outer ring split over ways 20 and 21, hole in way 22,
# a second inner ring (way 23) outside the outer ring.
MULTIPOLYGON_OSM = '''<?xml version="1.0" encoding="UTF-8"?>
<osm version="0.6">
  <node id="1" lat="0" lon="0"/>
  <node id="2" lat="0" lon="10"/>
  <node id="3" lat="10" lon="10"/>
  <node id="4" lat="10" lon="0"/>
  <node id="5" lat="3" lon="3"/>
  <node id="6" lat="3" lon="7"/>
  <node id="7" lat="7" lon="7"/>
  <node id="8" lat="7" lon="3"/>
  <node id="9" lat="20" lon="20"/>
  <node id="10" lat="20" lon="21"/>
  <node id="11" lat="21" lon="21"/>
  <way id="20">
    <nd ref="1"/><nd ref="2"/><nd ref="3"/>
  </way>
  <way id="21">
    <nd ref="3"/><nd ref="4"/><nd ref="1"/>
  </way>
  <way id="22">
    <nd ref="5"/><nd ref="6"/><nd ref="7"/><nd ref="8"/><nd ref="5"/>
  </way>
  <way id="23">
    <nd ref="9"/><nd ref="10"/><nd ref="11"/><nd ref="9"/>
  </way>
  <relation id="100" version="4">
    <member type="way" ref="20" role="outer"/>
    <member type="way" ref="21" role="outer"/>
    <member type="way" ref="22" role="inner"/>
    <tag k="type" v="multipolygon"/>
    <tag k="landuse" v="forest"/>
  </relation>
</osm>'''


# Ways 30 and 31 continue each other, way 32 is a separate backward leg.
ROUTE_OSM = '''<?xml version="1.0" encoding="UTF-8"?>
<osm version="0.6">
  <node id="1" lat="0" lon="0"/>
  <node id="2" lat="0" lon="1"/>
  <node id="3" lat="0" lon="2"/>
  <node id="4" lat="0" lon="3"/>
  <node id="5" lat="1" lon="1">
    <tag k="public_transport" v="stop_position"/>
  </node>
  <way id="30">
    <nd ref="1"/><nd ref="2"/>
    <tag k="highway" v="primary"/>
  </way>
  <way id="31">
    <nd ref="2"/><nd ref="3"/>
    <tag k="highway" v="primary"/>
  </way>
  <way id="32">
    <nd ref="3"/><nd ref="4"/>
    <tag k="highway" v="primary"/>
  </way>
  <relation id="200">
    <member type="way" ref="30" role="forward"/>
    <member type="way" ref="31" role="forward"/>
    <member type="way" ref="32" role="backward"/>
    <member type="node" ref="5" role="stop"/>
    <member type="node" ref="999" role="stop"/>
    <member type="way" ref="888" role="forward"/>
    <tag k="type" v="route"/>
    <tag k="route" v="bus"/>
    <tag k="ref" v="42"/>
  </relation>
</osm>'''


@pytest.fixture
def simple_osm():
    """Two ways sharing nodes, one tagged vertex and one free node."""
    return SIMPLE_OSM


@pytest.fixture
def multipolygon_osm():
    return MULTIPOLYGON_OSM


@pytest.fixture
def route_osm():
    return ROUTE_OSM


@pytest.fixture
def simple_osm_file(tmp_path):
    """Write SIMPLE_OSM to disk."""
    file = tmp_path / "simple.osm"
    file.write_text(SIMPLE_OSM, encoding='utf-8')
    return file


@pytest.fixture
def multipolygon_osm_file(tmp_path):
    file = tmp_path / "multipolygon.osm"
    file.write_text(MULTIPOLYGON_OSM, encoding='utf-8')
    return file


@pytest.fixture
def indexer():
    """DocumentIndexer without tag checking."""
    from osm_format.filters.tag_filter import TagFilter
    from osm_format.parsing.indexer import DocumentIndexer
    return DocumentIndexer(TagFilter())


@pytest.fixture
def resolver_for(indexer):
    """Factory: OSM text -> WayResolver over its index."""
    from osm_format.extraction.resolver import WayResolver
    from osm_format.parsing.document import to_element

    def make(text, share_nodes=False):
        return WayResolver(indexer.index(to_element(text)), share_nodes=share_nodes)

    return make


# Two separate outer squares, each with a hole; the hole of the second
# square is listed before the first square's outer ring.
TWO_OUTERS_OSM = '''<?xml version="1.0" encoding="UTF-8"?>
<osm version="0.6">
  <node id="1" lat="0" lon="0"/>
  <node id="2" lat="0" lon="10"/>
  <node id="3" lat="10" lon="10"/>
  <node id="4" lat="10" lon="0"/>
  <node id="5" lat="2" lon="2"/>
  <node id="6" lat="2" lon="4"/>
  <node id="7" lat="4" lon="4"/>
  <node id="8" lat="4" lon="2"/>
  <node id="11" lat="0" lon="20"/>
  <node id="12" lat="0" lon="30"/>
  <node id="13" lat="10" lon="30"/>
  <node id="14" lat="10" lon="20"/>
  <node id="15" lat="6" lon="26"/>
  <node id="16" lat="6" lon="28"/>
  <node id="17" lat="8" lon="28"/>
  <node id="18" lat="8" lon="26"/>
  <way id="40">
    <nd ref="1"/><nd ref="2"/><nd ref="3"/><nd ref="4"/><nd ref="1"/>
  </way>
  <way id="41">
    <nd ref="5"/><nd ref="6"/><nd ref="7"/><nd ref="8"/><nd ref="5"/>
  </way>
  <way id="42">
    <nd ref="11"/><nd ref="12"/><nd ref="13"/><nd ref="14"/><nd ref="11"/>
  </way>
  <way id="43">
    <nd ref="15"/><nd ref="16"/><nd ref="17"/><nd ref="18"/><nd ref="15"/>
  </way>
  <relation id="300">
    <member type="way" ref="40" role="outer"/>
    <member type="way" ref="43" role="inner"/>
    <member type="way" ref="42" role="outer"/>
    <member type="way" ref="41" role="inner"/>
    <tag k="type" v="multipolygon"/>
  </relation>
</osm>'''


@pytest.fixture
def two_outers_osm():
    """Multipolygon with two outer rings whose holes are listed crosswise."""
    return TWO_OUTERS_OSM
