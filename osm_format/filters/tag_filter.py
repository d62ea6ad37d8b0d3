"""Tag filtering and area classification."""
from typing import Dict, FrozenSet, Iterable, Tuple, TYPE_CHECKING

from osm_format.filters.categories import (
    DEFAULT_AREA_TAGS, DEFAULT_INTERESTING_TAGS_EXCLUDE
)

if TYPE_CHECKING:
    from osm_format.models.elements import IndexedWay


class TagFilter:
    """Decides which tags are kept and whether an element is interesting.

    With ``check_tags`` disabled every tag is kept, every way is interesting
    and a closed way is always an area.
    """

    def __init__(self, check_tags: bool = False,
                 exclude: Iterable[str] = DEFAULT_INTERESTING_TAGS_EXCLUDE,
                 area_tags: Iterable[str] = DEFAULT_AREA_TAGS):
        """Initialize tag filter.

        Args:
            check_tags: Enable tag based filtering and area detection
            exclude: Keys ignored when deciding if an element is interesting
            area_tags: Keys that mark a closed way as an area
        """
        self.check_tags = check_tags
        self.exclude: FrozenSet[str] = frozenset(exclude)
        self.area_tags: FrozenSet[str] = frozenset(area_tags)

    def is_interesting_key(self, key: str) -> bool:
        return key not in self.exclude

    def filter(self, raw_tags: Iterable[Tuple[str, str]]) -> Tuple[Dict[str, str], bool]:
        """Build a tag dict and the interesting verdict.

        Excluded keys are dropped from the result only when tag checking is
        enabled. The verdict is computed from the raw keys either way.

        Args:
            raw_tags: (key, value) pairs in document order

        Returns:
            Tuple of (tags, interesting)
        """
        tags = {}
        interesting = False
        for key, value in raw_tags:
            keep = self.is_interesting_key(key)
            if keep or not self.check_tags:
                tags[key] = value
            if keep:
                interesting = True
        return tags, interesting

    def is_interesting(self, tags: Dict[str, str]) -> bool:
        """Check if any tag key is outside the exclusion set."""
        return any(self.is_interesting_key(key) for key in tags)

    def is_area(self, way: 'IndexedWay') -> bool:
        """Check whether a way should be treated as an area.

        Args:
            way: Indexed way

        Returns:
            True if the way is closed and, when tag checking is enabled,
            carries at least one area tag
        """
        if not way.is_closed:
            return False
        if not self.check_tags:
            return True
        return any(key in self.area_tags for key in way.tags)
