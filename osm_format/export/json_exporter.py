"""GeoJSON export functionality."""
import json
from typing import Any, Dict, List

from osm_format.export.base import BaseExporter, summarize
from osm_format.models.entity import Entity


class GeoJSONExporter(BaseExporter):
    """Export entities as a GeoJSON FeatureCollection.

    Geometries are written in the reader's output CRS; with an internal
    projection configured the result is not RFC 7946 lon/lat.
    """

    def __init__(self, indent: int = 2):
        self.indent = indent

    def get_format_name(self) -> str:
        return 'geojson'

    def to_feature_collection(self, entities: List[Entity]) -> Dict[str, Any]:
        return {
            "type": "FeatureCollection",
            "features": [entity.to_geojson_feature() for entity in entities],
        }

    def export(self, entities: List[Entity],
               output_file: str) -> Dict[str, Any]:
        """Export to GeoJSON.

        Args:
            entities: Entities to export
            output_file: Output file path

        Returns:
            Result dict with metadata
        """
        with open(output_file, 'w', encoding='utf-8') as f:
            json.dump(self.to_feature_collection(entities), f,
                      indent=self.indent, default=str)

        return {
            'metadata': {
                'format': 'geojson',
                'output_file': output_file,
                **summarize(entities)
            }
        }
