"""Path assembly: joining oriented vertex sequences that share an endpoint.

Used by the relation builders to stitch member ways into rings and routes.
Endpoints are compared by exact coordinate equality; callers round
coordinates upstream if they need a tolerance.
"""
from typing import List, NamedTuple, Optional, Sequence

from osm_format.models.elements import Vertex


class PathMerge(NamedTuple):
    """Result of concatenate(); ``merged`` is None when ``ok`` is False."""
    ok: bool
    merged: Optional[List[Vertex]]


def _same(a: Vertex, b: Vertex) -> bool:
    return a.x == b.x and a.y == b.y


def concatenate(a: Sequence[Vertex], b: Sequence[Vertex]) -> PathMerge:
    """Merge two vertex sequences sharing an endpoint.

    Endpoint pairs are tried in this order: a-last/b-first, a-first/b-last,
    a-first/b-first, a-last/b-last. For the last two the shorter sequence
    drops its copy of the shared point and is reversed; on a length tie
    ``a`` counts as the longer one.

    Args:
        a: Current chain
        b: Sequence to add

    Returns:
        PathMerge(ok, merged). Inputs are never modified.

    Examples:
        >>> concatenate([Vertex(0, 0), Vertex(1, 0)],
        ...             [Vertex(1, 0), Vertex(2, 0)]).merged
        [Vertex(x=0, y=0, node_id=None), Vertex(x=1, y=0, node_id=None), Vertex(x=2, y=0, node_id=None)]
    """
    if not a:
        return PathMerge(True, list(b))
    if not b:
        return PathMerge(True, list(a))

    if _same(a[-1], b[0]):
        return PathMerge(True, list(a) + list(b[1:]))

    if _same(a[0], b[-1]):
        return PathMerge(True, list(b) + list(a[1:]))

    if _same(a[0], b[0]):
        if len(a) >= len(b):
            return PathMerge(True, list(reversed(b[1:])) + list(a))
        return PathMerge(True, list(reversed(a[1:])) + list(b))

    if _same(a[-1], b[-1]):
        if len(a) >= len(b):
            return PathMerge(True, list(a) + list(reversed(b[:-1])))
        return PathMerge(True, list(b) + list(reversed(a[:-1])))

    return PathMerge(False, None)
