"""Base class for entity exporters."""
from abc import ABC, abstractmethod
from collections import Counter
from typing import Any, Dict, List

from osm_format.models.entity import Entity


def summarize(entities: List[Entity]) -> Dict[str, Any]:
    """Count entities by OSM kind and geometry type.

    Args:
        entities: Entities to count

    Returns:
        Metadata dict with 'kinds', 'geometry_types' and 'total'
    """
    return {
        'kinds': dict(Counter(e.kind for e in entities)),
        'geometry_types': dict(Counter(e.geometry.geom_type for e in entities)),
        'total': len(entities),
    }


class BaseExporter(ABC):
    """Abstract base class for exporters."""

    @abstractmethod
    def export(self, entities: List[Entity],
               output_file: str) -> Dict[str, Any]:
        """Export entities to file.

        Args:
            entities: Entities returned by OSMFormat.read()
            output_file: Output file path

        Returns:
            Metadata dictionary
        """
        pass

    @abstractmethod
    def get_format_name(self) -> str:
        """Get the format name (e.g., 'geojson', 'shapefile').

        Returns:
            Format name string
        """
        pass
