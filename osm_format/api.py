"""Main OSMFormat API.

Provides the OSMFormat class with ``read`` (OSM XML -> entities) and
``write`` (entities -> OSM XML).
"""
import os
from typing import Iterable, List, Optional, Union

from osm_format.config import FormatConfig
from osm_format.export.xml_writer import OSMXMLWriter
from osm_format.extraction.translator import GeometryTranslator
from osm_format.filters.tag_filter import TagFilter
from osm_format.geometry.projection import Reprojector
from osm_format.models.entity import Entity
from osm_format.parsing.document import Document, to_element
from osm_format.parsing.indexer import DocumentIndexer


class OSMFormat:
    """OSM XML reader and writer.

    All collaborators are built once from the config and hold no per-call
    state, so one instance can serve concurrent read and write calls.
    """

    def __init__(self, config: Optional[FormatConfig] = None):
        """Initialize OSMFormat.

        Args:
            config: Optional FormatConfig; defaults read lon/lat without tag
                checking and without relation builders
        """
        self.config = config or FormatConfig()
        self.tag_filter = TagFilter(
            check_tags=self.config.check_tags,
            exclude=self.config.interesting_tags_exclude,
            area_tags=self.config.area_tags,
        )
        self.reprojector = Reprojector(
            internal=self.config.internal_projection,
            external=self.config.external_projection,
        )
        self.indexer = DocumentIndexer(self.tag_filter, self.reprojector)
        self.translator = GeometryTranslator(
            self.tag_filter,
            self.config.relation_builders,
            share_nodes=self.config.share_nodes,
            standalone_tag_threshold=self.config.standalone_tag_threshold,
        )
        self.writer = OSMXMLWriter(self.reprojector)

    def read(self, document: Document) -> List[Entity]:
        """Return the entities of an OSM document.

        Args:
            document: OSM XML text/bytes, a root element or an ElementTree

        Returns:
            Relation entities, then way entities, then node entities

        Raises:
            OSMParseError: On malformed markup or non-numeric attributes
        """
        index = self.indexer.index(to_element(document))
        return self.translator.translate(index)

    def read_file(self, osm_file_path: str) -> List[Entity]:
        """Read an OSM XML file.

        Args:
            osm_file_path: Path to OSM file

        Returns:
            Entities, see read()
        """
        if not os.path.exists(osm_file_path):
            raise FileNotFoundError(f"OSM file not found: {osm_file_path}")

        with open(osm_file_path, 'rb') as f:
            return self.read(f.read())

    def write(self, entities: Union[Entity, Iterable[Entity]]) -> str:
        """Serialize entities to OSM XML text.

        Args:
            entities: An entity or a sequence of entities

        Returns:
            OSM XML document
        """
        return self.writer.write(entities)

    def write_file(self, entities: Union[Entity, Iterable[Entity]],
                   output_file: str) -> None:
        """Serialize entities to an OSM XML file."""
        with open(output_file, 'w', encoding='utf-8') as f:
            f.write(self.write(entities))
