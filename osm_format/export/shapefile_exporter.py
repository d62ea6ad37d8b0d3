"""Shapefile export functionality.

Shapefiles require homogeneous geometry types, so this exporter splits
output by geometry kind:
- {basename}_points.shp for Point entities
- {basename}_lines.shp for LineString and MultiLineString entities
- {basename}_polygons.shp for Polygon and MultiPolygon entities

Geometry collections (generic relations) have no shapefile equivalent and
are skipped.
"""
import os
from typing import Any, Dict, List

import shapefile
from loguru import logger
from shapely.geometry.polygon import orient

from osm_format.export.base import BaseExporter
from osm_format.models.entity import Entity

# WGS84 projection definition for .prj file
WGS84_PRJ = (
    'GEOGCS["GCS_WGS_1984",DATUM["D_WGS_1984",'
    'SPHEROID["WGS_1984",6378137,298.257223563]],'
    'PRIMEM["Greenwich",0],UNIT["Degree",0.017453292519943295]]'
)

_LAYER_BY_GEOM_TYPE = {
    'Point': 'points',
    'LineString': 'lines',
    'MultiLineString': 'lines',
    'Polygon': 'polygons',
    'MultiPolygon': 'polygons',
}

_SHAPE_TYPES = {
    'points': shapefile.POINT,
    'lines': shapefile.POLYLINE,
    'polygons': shapefile.POLYGON,
}


class ShapefileExporter(BaseExporter):
    """Export to ESRI Shapefile format.

    Each shapefile includes .shp, .shx, .dbf and, when ``write_prj`` is set,
    a WGS84 .prj. Leave ``write_prj`` off when entities were read with an
    internal projection.
    """

    # Maximum field name length for DBF format
    MAX_FIELD_NAME = 10

    STANDARD_FIELDS = [
        ('osm_id', 'C', 20),
        ('osm_type', 'C', 10),
        ('fid', 'C', 40),
        ('name', 'C', 100),
    ]

    def __init__(self, include_all_tags: bool = False, write_prj: bool = True):
        """Initialize Shapefile exporter.

        Args:
            include_all_tags: Include all OSM tags as DBF fields (names truncated)
            write_prj: Write a WGS84 .prj next to each shapefile
        """
        self.include_all_tags = include_all_tags
        self.write_prj = write_prj

    def get_format_name(self) -> str:
        return 'shapefile'

    def export(self, entities: List[Entity],
               output_file: str) -> Dict[str, Any]:
        """Export to Shapefile format.

        Args:
            entities: Entities to export
            output_file: Base output file path (extension will be stripped)

        Returns:
            Result dict with metadata including paths to created files
        """
        base_path = os.path.splitext(output_file)[0]

        layers: Dict[str, List[Entity]] = {'points': [], 'lines': [], 'polygons': []}
        skipped = 0
        for entity in entities:
            layer = _LAYER_BY_GEOM_TYPE.get(entity.geometry.geom_type)
            if layer is None or entity.geometry.is_empty:
                skipped += 1
                continue
            layers[layer].append(entity)

        if skipped:
            logger.debug("{} entities have no shapefile geometry, skipped", skipped)

        created_files = []
        for layer, layer_entities in layers.items():
            if not layer_entities:
                continue
            path = f"{base_path}_{layer}"
            self._write_shapefile(layer_entities, path, _SHAPE_TYPES[layer])
            created_files.append(f"{path}.shp")

        return {
            'metadata': {
                'format': 'shapefile',
                'files_created': created_files,
                'points_exported': len(layers['points']),
                'lines_exported': len(layers['lines']),
                'polygons_exported': len(layers['polygons']),
                'skipped': skipped,
            }
        }

    def _write_shapefile(self, entities: List[Entity], base_path: str,
                         shape_type: int) -> None:
        extra_fields = set()
        if self.include_all_tags:
            for entity in entities:
                extra_fields.update(entity.tags.keys())

        with shapefile.Writer(base_path, shapeType=shape_type) as w:
            for name, ftype, size in self.STANDARD_FIELDS:
                w.field(name, ftype, size)

            used_names = {name for name, _, _ in self.STANDARD_FIELDS}
            field_mapping = {}  # original -> truncated
            for tag_key in sorted(extra_fields - used_names):
                truncated = self._truncate_field_name(tag_key, used_names)
                field_mapping[tag_key] = truncated
                used_names.add(truncated)
                w.field(truncated, 'C', 100)

            for entity in entities:
                self._write_entity(w, entity, shape_type, field_mapping)

        if self.write_prj:
            with open(f"{base_path}.prj", 'w', encoding='utf-8') as prj:
                prj.write(WGS84_PRJ)

    def _truncate_field_name(self, name: str, existing) -> str:
        """Truncate field name to DBF limit, ensuring uniqueness.

        Args:
            name: Original field name
            existing: Already used truncated names

        Returns:
            Unique truncated field name (max 10 chars)
        """
        existing = set(existing)
        truncated = name[:self.MAX_FIELD_NAME]
        if truncated not in existing:
            return truncated

        counter = 1
        while True:
            suffix = str(counter)
            candidate = f"{name[:self.MAX_FIELD_NAME - len(suffix)]}{suffix}"
            if candidate not in existing:
                return candidate
            counter += 1

    @staticmethod
    def _polygon_parts(polygon) -> List[List]:
        # Shapefiles want clockwise outer rings and counter-clockwise holes
        polygon = orient(polygon, sign=-1.0)
        return [list(polygon.exterior.coords)] + [
            list(ring.coords) for ring in polygon.interiors
        ]

    def _write_entity(self, writer, entity: Entity, shape_type: int,
                      field_mapping: Dict[str, str]) -> None:
        geometry = entity.geometry
        if shape_type == shapefile.POINT:
            writer.point(geometry.x, geometry.y)
        elif shape_type == shapefile.POLYLINE:
            lines = geometry.geoms if geometry.geom_type == 'MultiLineString' else [geometry]
            writer.line([list(line.coords) for line in lines if not line.is_empty])
        else:
            polygons = geometry.geoms if geometry.geom_type == 'MultiPolygon' else [geometry]
            parts = []
            for polygon in polygons:
                parts.extend(self._polygon_parts(polygon))
            writer.poly(parts)

        record = {
            'osm_id': '' if entity.id is None else str(entity.id),
            'osm_type': entity.kind,
            'fid': entity.fid or '',
            'name': entity.tags.get('name', ''),
        }
        for orig, trunc in field_mapping.items():
            value = entity.tags.get(orig, '')
            # DBF character fields hold at most 254 bytes
            record[trunc] = str(value)[:254] if value else ''

        writer.record(**record)
