"""Path assembly and coordinate reprojection."""

from osm_format.geometry.paths import PathMerge, concatenate
from osm_format.geometry.projection import Reprojector, WGS84

__all__ = ['PathMerge', 'concatenate', 'Reprojector', 'WGS84']
