"""OSM XML serialization and file exporters."""

from osm_format.export.base import BaseExporter, summarize
from osm_format.export.xml_writer import OSMXMLWriter, WriteContext, action_for
from osm_format.export.json_exporter import GeoJSONExporter
from osm_format.export.shapefile_exporter import ShapefileExporter

__all__ = [
    'BaseExporter', 'summarize', 'OSMXMLWriter', 'WriteContext', 'action_for',
    'GeoJSONExporter', 'ShapefileExporter',
]
