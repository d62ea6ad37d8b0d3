"""Reader/writer configuration.

A FormatConfig is fixed at construction; OSMFormat never mutates it, so one
instance can be shared between threads.
"""
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Dict, FrozenSet, List, Mapping, Optional

from osm_format.errors import ConfigError
from osm_format.filters.categories import (
    DEFAULT_AREA_TAGS, DEFAULT_INTERESTING_TAGS_EXCLUDE
)
from osm_format.geometry.projection import WGS84

RelationBuilder = Callable[..., List[Any]]


@dataclass(frozen=True)
class FormatConfig:
    """Settings for reading and writing OSM documents.

    Attributes:
        check_tags: Filter tags and use them to decide areas and node output
        share_nodes: Ways reuse each node's own vertex instead of a copy
        interesting_tags_exclude: Keys that do not make an element interesting
        area_tags: Keys marking a closed way as an area (with check_tags)
        relation_builders: Relation ``type`` tag value -> builder function
        internal_projection: CRS of output geometries, None keeps lon/lat
        external_projection: CRS of the OSM document
        standalone_tag_threshold: A node used by a way is still output on its
            own when it has more tags than this (with check_tags)
    """
    check_tags: bool = False
    share_nodes: bool = False
    interesting_tags_exclude: FrozenSet[str] = DEFAULT_INTERESTING_TAGS_EXCLUDE
    area_tags: FrozenSet[str] = DEFAULT_AREA_TAGS
    relation_builders: Mapping[str, RelationBuilder] = field(
        default_factory=lambda: MappingProxyType({}), hash=False)
    internal_projection: Optional[str] = None
    external_projection: str = WGS84
    standalone_tag_threshold: int = 0

    def __post_init__(self):
        object.__setattr__(self, 'interesting_tags_exclude',
                           frozenset(self.interesting_tags_exclude))
        object.__setattr__(self, 'area_tags', frozenset(self.area_tags))
        if not isinstance(self.relation_builders, MappingProxyType):
            object.__setattr__(self, 'relation_builders',
                               MappingProxyType(dict(self.relation_builders)))
        for relation_type, builder in self.relation_builders.items():
            if not callable(builder):
                raise ConfigError(f"Builder for relation type '{relation_type}' is not callable")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'FormatConfig':
        """Create a config from plain data (e.g. a JSON file).

        ``relation_builders`` maps relation types to builder names
        ('multipolygon', 'route', 'route_with_roles', 'generic').

        Raises:
            ConfigError: On unknown keys or builder names
        """
        from osm_format.extraction.relations import BUILDERS_BY_NAME

        known = set(cls.__dataclass_fields__)
        unknown = set(data) - known
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(sorted(unknown))}")

        values = dict(data)
        builders = {}
        for relation_type, name in values.pop('relation_builders', {}).items():
            if name not in BUILDERS_BY_NAME:
                raise ConfigError(
                    f"Unknown relation builder '{name}' for type '{relation_type}'. "
                    f"Choose from: {', '.join(sorted(BUILDERS_BY_NAME))}"
                )
            builders[relation_type] = BUILDERS_BY_NAME[name]
        return cls(relation_builders=builders, **values)
