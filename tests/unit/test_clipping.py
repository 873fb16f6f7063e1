"""Unit tests for polygon clipping."""

import itertools

from bsptree.core.classify import Classification, classify_polygon
from bsptree.core.clipping import split_polygon
from bsptree.core.geometry import signed_distance
from bsptree.domain import Partition, Point, Polygon

# Vertical plane x = 5, front is +x
PLANE = Partition(Point(5.0, 0.0), Point(1.0, 0.0))

SQUARE = Polygon(
    9,
    (Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)),
    color="#f59e0b",
)


class TestSplitPolygon:
    """Tests for split_polygon."""

    def test_square_split_in_half(self) -> None:
        result = split_polygon(SQUARE, PLANE)

        assert result.front is not None
        assert result.back is not None
        assert result.crossings == 2
        assert set(result.front.points) == {Point(5, 0), Point(10, 0), Point(10, 10), Point(5, 10)}
        assert set(result.back.points) == {Point(0, 0), Point(5, 0), Point(5, 10), Point(0, 10)}

    def test_crossings_added_to_both_fragments(self) -> None:
        """Test each crossing point lands in both fragments."""
        result = split_polygon(SQUARE, PLANE)
        total = len(result.front.points) + len(result.back.points)  # type: ignore[union-attr]
        assert total == len(SQUARE.points) + 2 * result.crossings
        assert total == 8

    def test_vertex_count_with_vertex_on_plane(self) -> None:
        """Test an on-plane vertex is shared as well as each crossing point."""
        pentagon = Polygon(4, (Point(5, 0), Point(10, 5), Point(5, 10), Point(0, 8), Point(0, 2)))
        on_plane = sum(1 for p in pentagon.points if signed_distance(p, PLANE) == 0)
        result = split_polygon(pentagon, PLANE)

        total = len(result.front.points) + len(result.back.points)  # type: ignore[union-attr]
        assert total == len(pentagon.points) + 2 * result.crossings + on_plane
        assert (result.crossings, on_plane) == (0, 2)

    def test_fragments_lie_on_their_side(self) -> None:
        triangle = Polygon(1, (Point(0, 0), Point(9, 2), Point(3, 8)))
        front, back = split_polygon(triangle, PLANE)

        assert front is not None and back is not None
        assert all(signed_distance(p, PLANE) >= -1e-9 for p in front.points)
        assert all(signed_distance(p, PLANE) <= 1e-9 for p in back.points)
        assert classify_polygon(front, PLANE) is Classification.FRONT
        assert classify_polygon(back, PLANE) is Classification.BACK

    def test_vertex_on_plane_goes_to_both(self) -> None:
        """Test a vertex exactly on the plane closes both fragments."""
        diamond = Polygon(2, (Point(5, 0), Point(10, 5), Point(5, 10), Point(0, 5)))
        result = split_polygon(diamond, PLANE)

        assert result.crossings == 0
        assert result.front is not None and result.back is not None
        assert Point(5, 0) in result.front.points
        assert Point(5, 0) in result.back.points
        assert len(result.front.points) == 3
        assert len(result.back.points) == 3

    def test_degenerate_side_is_absent(self) -> None:
        """Test a side with fewer than three vertices is dropped."""
        triangle = Polygon(3, (Point(5, 0), Point(10, 5), Point(5, 10)))
        result = split_polygon(triangle, PLANE)

        assert result.front is not None
        assert result.back is None
        assert result.fragments == [result.front]

    def test_fragments_inherit_id_without_factory(self) -> None:
        front, back = split_polygon(SQUARE, PLANE)
        assert front.id == back.id == 9  # type: ignore[union-attr]
        assert front.color == back.color == "#f59e0b"  # type: ignore[union-attr]

    def test_fragments_get_fresh_ids_from_factory(self) -> None:
        ids = itertools.count(100)
        front, back = split_polygon(SQUARE, PLANE, id_factory=lambda: next(ids))

        assert front.id == 100  # type: ignore[union-attr]
        assert back.id == 101  # type: ignore[union-attr]
        assert front.source_id == back.source_id == 9  # type: ignore[union-attr]

    def test_input_not_mutated(self) -> None:
        before = SQUARE.points
        split_polygon(SQUARE, PLANE)
        assert SQUARE.points == before
