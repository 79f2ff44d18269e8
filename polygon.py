# polygon.py
"""
Polygon validation: a polygon may only be drawn when no two non-adjacent edges
properly cross each other.

Known limitation: the crossing test uses strict sign comparisons, so collinear
overlapping edges and edges that touch exactly at a vertex are NOT reported as
intersecting.
"""
import logging
from typing import NamedTuple, Optional, Tuple

_LOG = logging.getLogger(__name__)

TOO_FEW_VERTICES = "too_few_vertices"
SELF_INTERSECTING = "self_intersecting"


class PolygonCheck(NamedTuple):
    ok: bool
    reason: Optional[str] = None
    edges: Optional[Tuple[int, int]] = None


def cross(a, b, c):
    """向量 ab 与 ac 的叉积（z 分量）"""
    return (b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0])


def _opposite(d1, d2):
    return (d1 > 0 and d2 < 0) or (d1 < 0 and d2 > 0)


def segments_intersect(a1, a2, b1, b2):
    """两条线段是否真正相交（严格异号；共线/端点接触视为不相交）"""
    d1 = cross(a1, a2, b1)
    d2 = cross(a1, a2, b2)
    d3 = cross(b1, b2, a1)
    d4 = cross(b1, b2, a2)
    return _opposite(d1, d2) and _opposite(d3, d4)


def non_adjacent_edge_pairs(n):
    """枚举需要检测的边对 (i, j)，边 k 为 (p[k], p[(k+1) % n])。

    跳过同一条边以及首尾相接的相邻边（含环绕的最后一条边与第一条边）。
    """
    for i in range(n):
        for j in range(i + 1, n):
            if (j + 1) % n == i or (i + 1) % n == j:
                continue
            yield i, j


def find_self_intersection(points):
    """返回第一对相交的边 (i, j)，没有则返回 None"""
    n = len(points)
    for i, j in non_adjacent_edge_pairs(n):
        if segments_intersect(points[i], points[(i + 1) % n],
                              points[j], points[(j + 1) % n]):
            return i, j
    return None


def validate_polygon(points):
    if len(points) < 3:
        return PolygonCheck(False, TOO_FEW_VERTICES)
    edges = find_self_intersection(points)
    if edges is not None:
        _LOG.info("polygon rejected: edges %d and %d cross", edges[0], edges[1])
        return PolygonCheck(False, SELF_INTERSECTING, edges)
    return PolygonCheck(True)
