"""OSM document parsing and indexing."""

from osm_format.parsing.document import Document, to_element
from osm_format.parsing.indexer import DocumentIndexer

__all__ = ['Document', 'to_element', 'DocumentIndexer']
