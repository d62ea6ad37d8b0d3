"""Tests for FormatConfig."""
import dataclasses

import pytest

from osm_format.config import FormatConfig
from osm_format.errors import ConfigError
from osm_format.extraction.relations import (
    multipolygon_builder, route_with_roles_builder
)
from osm_format.filters.categories import DEFAULT_AREA_TAGS
from osm_format.geometry.projection import WGS84, Reprojector


class TestFormatConfig:
    def test_defaults(self):
        config = FormatConfig()
        assert config.check_tags is False
        assert config.share_nodes is False
        assert config.area_tags == DEFAULT_AREA_TAGS
        assert dict(config.relation_builders) == {}
        assert config.internal_projection is None
        assert config.external_projection == WGS84
        assert config.standalone_tag_threshold == 0

    def test_is_frozen(self):
        config = FormatConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.check_tags = True

    def test_collections_are_immutable(self):
        builders = {'multipolygon': multipolygon_builder}
        config = FormatConfig(area_tags=['building'], relation_builders=builders)

        assert config.area_tags == frozenset({'building'})
        builders['route'] = multipolygon_builder
        assert 'route' not in config.relation_builders
        with pytest.raises(TypeError):
            config.relation_builders['route'] = multipolygon_builder

    def test_is_hashable(self):
        config = FormatConfig(relation_builders={'multipolygon': multipolygon_builder})
        same = FormatConfig(relation_builders={'multipolygon': multipolygon_builder})
        assert hash(config) == hash(same)
        assert {config: 'cached'}[same] == 'cached'

    def test_non_callable_builder(self):
        with pytest.raises(ConfigError):
            FormatConfig(relation_builders={'route': 'route'})


class TestFromDict:
    def test_values_and_builder_names(self):
        config = FormatConfig.from_dict({
            'check_tags': True,
            'area_tags': ['building', 'landuse'],
            'relation_builders': {'multipolygon': 'multipolygon',
                                  'route': 'route_with_roles'},
            'standalone_tag_threshold': 2,
        })
        assert config.check_tags is True
        assert config.area_tags == frozenset({'building', 'landuse'})
        assert config.relation_builders['multipolygon'] is multipolygon_builder
        assert config.relation_builders['route'] is route_with_roles_builder
        assert config.standalone_tag_threshold == 2

    def test_empty(self):
        assert FormatConfig.from_dict({}) == FormatConfig()

    def test_unknown_key(self):
        with pytest.raises(ConfigError, match='check_tag'):
            FormatConfig.from_dict({'check_tag': True})

    def test_unknown_builder(self):
        with pytest.raises(ConfigError, match='Unknown relation builder'):
            FormatConfig.from_dict({'relation_builders': {'route': 'railway'}})

    def test_config_error_is_value_error(self):
        with pytest.raises(ValueError):
            FormatConfig.from_dict({'bogus': 1})


class TestProjectionSettings:
    def test_invalid_projection(self):
        with pytest.raises(ConfigError):
            Reprojector(internal='EPSG:999999')

    def test_same_crs_passes_through(self):
        reprojector = Reprojector(internal=WGS84)
        assert not reprojector.active
        assert reprojector.to_internal(1.5, 2.5) == (1.5, 2.5)
