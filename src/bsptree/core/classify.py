"""Polygon classification against partition planes."""

from enum import Enum

from bsptree.core.geometry import signed_distance
from bsptree.domain import Partition, Point, Polygon

DEFAULT_EPSILON = 0.1


class Classification(str, Enum):
    """Position of a polygon relative to a plane."""

    FRONT = "FRONT"
    BACK = "BACK"
    COPLANAR = "COPLANAR"
    SPANNING = "SPANNING"


def classify_point(
    point: Point, partition: Partition, epsilon: float = DEFAULT_EPSILON
) -> Classification:
    """Classify a single point, treating the epsilon band as on the plane."""
    dist = signed_distance(point, partition)
    if dist > epsilon:
        return Classification.FRONT
    if dist < -epsilon:
        return Classification.BACK
    return Classification.COPLANAR


def classify_polygon(
    polygon: Polygon, partition: Partition, epsilon: float = DEFAULT_EPSILON
) -> Classification:
    """Classify a polygon against a partition plane.

    Counts vertices strictly beyond ``+epsilon`` (front) and strictly
    beyond ``-epsilon`` (back). Vertices inside the band count as neither,
    so a polygon lying entirely within the band is COPLANAR even when it
    is not exactly on the plane.

    Args:
        polygon: Polygon to classify
        partition: Splitting plane
        epsilon: Half-width of the on-plane tolerance band

    Returns:
        FRONT, BACK, COPLANAR or SPANNING
    """
    front_count = 0
    back_count = 0

    for point in polygon.points:
        dist = signed_distance(point, partition)
        if dist > epsilon:
            front_count += 1
        elif dist < -epsilon:
            back_count += 1

    if front_count > 0 and back_count == 0:
        return Classification.FRONT
    if back_count > 0 and front_count == 0:
        return Classification.BACK
    if front_count == 0 and back_count == 0:
        return Classification.COPLANAR
    return Classification.SPANNING
