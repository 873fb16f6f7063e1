"""Core BSP algorithms for bsptree.

This module contains the algorithms for:

- Plane geometry (signed distance, partition derivation)
- Polygon classification against a plane
- Polygon clipping along a plane
- Tree construction and painter's-order traversal
- Scene generation

Key functions:
- signed_distance: Signed distance from a point to a plane
- create_partition: Plane through a polygon's leading edge
- classify_polygon: FRONT, BACK, COPLANAR or SPANNING
- split_polygon: Front and back fragments of a spanning polygon

Key classes:
- BSPTree: Incremental tree with painter's-order traversal
"""

from bsptree.core.classify import Classification, classify_point, classify_polygon
from bsptree.core.clipping import SplitResult, split_polygon
from bsptree.core.geometry import create_partition, intersect_edge, signed_distance
from bsptree.core.scene import (
    PALETTE,
    default_viewpoint,
    random_scene,
    random_square,
    sample_scene,
    square,
)
from bsptree.core.tree import BSPTree

__all__ = [
    "PALETTE",
    # Tree
    "BSPTree",
    # Classification
    "Classification",
    "SplitResult",
    "classify_point",
    "classify_polygon",
    "create_partition",
    "default_viewpoint",
    "intersect_edge",
    "random_scene",
    "random_square",
    "sample_scene",
    "signed_distance",
    "split_polygon",
    "square",
]
