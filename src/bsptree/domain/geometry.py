"""Core geometric types for BSP tree construction.

This module defines the value types the tree is built from:
- Point: A 2D coordinate, also used as a vector
- Partition: A splitting plane (an infinite line in 2D)
- Polygon: An identified polygon with an opaque display attribute
"""

import math
from dataclasses import dataclass, field, replace
from typing import Any


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable. Doubles as a 2D vector for plane arithmetic.

    Attributes:
        x: X coordinate in world units
        y: Y coordinate in world units
    """

    x: float
    y: float

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Point":
        return Point(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def dot(self, other: "Point") -> float:
        """Dot product with another point treated as a vector."""
        return self.x * other.x + self.y * other.y

    def length(self) -> float:
        """Euclidean length of the vector from the origin."""
        return math.hypot(self.x, self.y)

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=float(data["x"]), y=float(data["y"]))


@dataclass(frozen=True, slots=True)
class Partition:
    """A splitting plane.

    The plane is the infinite line through ``point`` perpendicular to
    ``normal``. The normal has unit length; the half-space it points into
    is the front side.

    Attributes:
        point: A point lying on the plane
        normal: Unit-length normal vector
    """

    point: Point
    normal: Point


@dataclass(frozen=True, slots=True)
class Polygon:
    """A polygon stored in the tree.

    Polygons are never mutated. Splitting produces new values that carry
    the same ``color``. The display attribute is opaque to the tree.

    Attributes:
        id: Polygon identifier
        points: Vertices in edge order
        color: Display attribute carried through unchanged
        source_id: Identifier of the polygon originally inserted by the
            caller, set on fragments produced by splitting
    """

    id: int
    points: tuple[Point, ...]
    color: str | None = None
    source_id: int | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.points, tuple):
            object.__setattr__(self, "points", tuple(self.points))

    @property
    def origin_id(self) -> int:
        """Identifier of the caller's polygon this one descends from."""
        return self.source_id if self.source_id is not None else self.id

    def __len__(self) -> int:
        return len(self.points)

    def with_points(self, points: list[Point], polygon_id: int | None = None) -> "Polygon":
        """Create a fragment of this polygon with new vertices.

        Args:
            points: Vertices of the fragment
            polygon_id: Identifier for the fragment (keeps this one if None)

        Returns:
            New polygon that remembers its origin
        """
        return replace(
            self,
            id=self.id if polygon_id is None else polygon_id,
            points=tuple(points),
            source_id=self.origin_id,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation of the polygon
        """
        data: dict[str, Any] = {
            "id": self.id,
            "points": [p.to_dict() for p in self.points],
            "color": self.color,
        }
        if self.source_id is not None:
            data["source_id"] = self.source_id
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Polygon":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a polygon

        Returns:
            Polygon instance
        """
        return cls(
            id=int(data["id"]),
            points=tuple(Point.from_dict(p) for p in data["points"]),
            color=data.get("color"),
            source_id=data.get("source_id"),
        )
