"""Tag filtering and area classification."""

from osm_format.filters.tag_filter import TagFilter
from osm_format.filters.categories import (
    DEFAULT_AREA_TAGS, DEFAULT_INTERESTING_TAGS_EXCLUDE
)

__all__ = ['TagFilter', 'DEFAULT_AREA_TAGS', 'DEFAULT_INTERESTING_TAGS_EXCLUDE']
