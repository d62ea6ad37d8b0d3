"""Default tag key sets used by the tag filter.

These frozensets can be replaced through FormatConfig without modifying core
code.
"""
from typing import FrozenSet

# Keys that never make an element interesting on their own
DEFAULT_INTERESTING_TAGS_EXCLUDE: FrozenSet[str] = frozenset({
    'source', 'source_ref', 'source:ref', 'history', 'attribution',
    'created_by'
})

# Keys marking a closed way as an area
DEFAULT_AREA_TAGS: FrozenSet[str] = frozenset({
    'area', 'building', 'leisure', 'tourism', 'ruins', 'historic',
    'landuse', 'military', 'natural', 'sport'
})
