"""Plane geometry for BSP construction.

This module provides the primitive operations every other part of the
tree builds on:
- Signed distance from a point to a partition plane
- Partition derivation from a polygon's leading edge
- Edge/plane intersection

All functions are pure and stateless.
"""

import math

from bsptree.domain import Partition, Point, Polygon
from bsptree.exceptions import DegenerateEdgeError, InvalidPolygonError


def signed_distance(point: Point, partition: Partition) -> float:
    """Calculate the signed distance from a point to a partition plane.

    Positive values lie in front of the plane (the side the normal points
    into), negative values behind it. The magnitude is the Euclidean
    distance because the normal has unit length.

    Args:
        point: The point to measure
        partition: The splitting plane

    Returns:
        Signed distance in world units

    Examples:
        >>> plane = Partition(Point(0.0, 0.0), Point(0.0, 1.0))
        >>> signed_distance(Point(5.0, 50.0), plane)
        50.0
        >>> signed_distance(Point(5.0, -3.0), plane)
        -3.0
    """
    return (point - partition.point).dot(partition.normal)


def create_partition(polygon: Polygon) -> Partition:
    """Derive a splitting plane from a polygon's first edge.

    The plane passes through the first vertex. Its normal is the
    left-perpendicular of the edge from the first to the second vertex,
    normalized to unit length.

    Args:
        polygon: Polygon whose leading edge defines the plane

    Returns:
        Partition through the leading edge

    Raises:
        InvalidPolygonError: If the polygon has fewer than two vertices
        DegenerateEdgeError: If the first two vertices coincide

    Examples:
        >>> square = Polygon(1, (Point(0, 0), Point(10, 0), Point(10, 10)))
        >>> create_partition(square).normal
        Point(x=0.0, y=1.0)
    """
    if len(polygon.points) < 2:
        raise InvalidPolygonError(polygon.id, len(polygon.points))

    p1, p2 = polygon.points[0], polygon.points[1]
    dx = p2.x - p1.x
    dy = p2.y - p1.y
    length = math.hypot(dx, dy)

    if length == 0.0 or not math.isfinite(length):
        raise DegenerateEdgeError(polygon.id, p1.x, p1.y)

    return Partition(point=p1, normal=Point(-dy / length, dx / length))


def intersect_edge(curr: Point, nxt: Point, curr_dist: float, next_dist: float) -> Point:
    """Find where the edge (curr, nxt) crosses a plane.

    Args:
        curr: Start of the edge
        nxt: End of the edge
        curr_dist: Signed distance of ``curr`` to the plane
        next_dist: Signed distance of ``nxt`` to the plane, of opposite sign

    Returns:
        Interpolated crossing point
    """
    t = curr_dist / (curr_dist - next_dist)
    return curr + (nxt - curr) * t
