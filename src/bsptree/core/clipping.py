"""Polygon clipping along a partition plane.

Splits a spanning polygon into the fragment in front of a plane and the
fragment behind it. Vertices exactly on the plane go to both fragments so
that each stays closed; every edge that strictly crosses the plane
contributes its intersection point to both.
"""

from collections.abc import Callable, Iterator
from dataclasses import dataclass

from bsptree.core.geometry import intersect_edge, signed_distance
from bsptree.domain import Partition, Point, Polygon

MIN_VERTICES = 3


@dataclass(frozen=True, slots=True)
class SplitResult:
    """Fragments produced by splitting a polygon.

    A side is None when it collected fewer than three vertices. That is a
    normal outcome near the tolerance band, not an error.

    Attributes:
        front: Fragment on the front side of the plane
        back: Fragment on the back side of the plane
        crossings: Number of edges that strictly crossed the plane
    """

    front: Polygon | None
    back: Polygon | None
    crossings: int = 0

    def __iter__(self) -> Iterator[Polygon | None]:
        yield self.front
        yield self.back

    @property
    def fragments(self) -> list[Polygon]:
        """Non-absent fragments, front first."""
        return [p for p in (self.front, self.back) if p is not None]


def split_polygon(
    polygon: Polygon,
    partition: Partition,
    id_factory: Callable[[], int] | None = None,
) -> SplitResult:
    """Split a polygon into front and back fragments.

    Args:
        polygon: Polygon to split, normally one classified as SPANNING
        partition: Splitting plane
        id_factory: Supplies a fresh identifier for each fragment. When
            None, fragments keep the identifier of ``polygon``.

    Returns:
        SplitResult with the fragments and the number of plane crossings
    """
    front_points: list[Point] = []
    back_points: list[Point] = []
    crossings = 0

    points = polygon.points
    count = len(points)
    distances = [signed_distance(p, partition) for p in points]

    for i in range(count):
        j = (i + 1) % count
        curr, nxt = points[i], points[j]
        curr_dist, next_dist = distances[i], distances[j]

        if curr_dist >= 0:
            front_points.append(curr)
        if curr_dist <= 0:
            back_points.append(curr)

        if (curr_dist > 0 and next_dist < 0) or (curr_dist < 0 and next_dist > 0):
            crossing = intersect_edge(curr, nxt, curr_dist, next_dist)
            front_points.append(crossing)
            back_points.append(crossing)
            crossings += 1

    def fragment(fragment_points: list[Point]) -> Polygon | None:
        if len(fragment_points) < MIN_VERTICES:
            return None
        new_id = id_factory() if id_factory is not None else None
        return polygon.with_points(fragment_points, polygon_id=new_id)

    front = fragment(front_points)
    back = fragment(back_points)
    return SplitResult(front=front, back=back, crossings=crossings)
