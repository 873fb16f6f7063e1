"""Domain models for bsptree.

This module contains the value types and tree node used by the BSP
algorithms. Geometric values are frozen dataclasses; only BSPNode is
mutable, and only the tree mutates it.

Key classes:
- Point: A 2D coordinate / vector
- Partition: A splitting plane with unit normal
- Polygon: An identified polygon with an opaque display attribute
- BSPNode: A node holding a partition, children and coplanar polygons
"""

from bsptree.domain.geometry import Partition, Point, Polygon
from bsptree.domain.node import BSPNode

__all__: list[str] = [
    "BSPNode",
    "Partition",
    "Point",
    "Polygon",
]
