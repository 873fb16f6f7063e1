"""Unit tests for plane geometry."""

import math

import pytest

from bsptree.core.geometry import create_partition, intersect_edge, signed_distance
from bsptree.domain import Partition, Point, Polygon
from bsptree.exceptions import DegenerateEdgeError, GeometryError, InvalidPolygonError


class TestSignedDistance:
    """Tests for signed_distance."""

    def test_front_is_positive(self) -> None:
        plane = Partition(Point(0.0, 0.0), Point(0.0, 1.0))
        assert signed_distance(Point(5.0, 50.0), plane) == 50.0

    def test_back_is_negative(self) -> None:
        plane = Partition(Point(0.0, 0.0), Point(0.0, 1.0))
        assert signed_distance(Point(-3.0, -7.0), plane) == -7.0

    def test_on_plane_is_zero(self) -> None:
        plane = Partition(Point(2.0, 2.0), Point(1.0, 0.0))
        assert signed_distance(Point(2.0, 100.0), plane) == 0.0

    def test_magnitude_is_euclidean(self) -> None:
        """Test distance to a diagonal plane."""
        s = math.sqrt(0.5)
        plane = Partition(Point(0.0, 0.0), Point(-s, s))
        assert signed_distance(Point(0.0, 2.0), plane) == pytest.approx(math.sqrt(2.0))


class TestCreatePartition:
    """Tests for create_partition."""

    def test_left_perpendicular_of_leading_edge(self) -> None:
        square = Polygon(1, (Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)))
        partition = create_partition(square)

        assert partition.point == Point(0, 0)
        assert partition.normal.x == pytest.approx(0.0)
        assert partition.normal.y == pytest.approx(1.0)

    def test_horizontal_edge_normal_repr(self) -> None:
        """Test the normal of a horizontal integer edge has no negative zero."""
        triangle = Polygon(1, (Point(0, 0), Point(10, 0), Point(10, 10)))
        normal = create_partition(triangle).normal

        assert repr(normal) == "Point(x=0.0, y=1.0)"
        assert math.copysign(1.0, normal.x) == 1.0

    def test_normal_is_unit_length(self) -> None:
        """Test the normal has unit length for arbitrary edges."""
        for p2 in [Point(3, 4), Point(-1e-3, 2e-3), Point(1e6, -7.5), Point(-2, -2)]:
            polygon = Polygon(1, (Point(1, 1), Point(1, 1) + p2, Point(0, 5)))
            normal = create_partition(polygon).normal
            assert abs(normal.length() - 1.0) < 1e-6

    def test_interior_of_ccw_polygon_is_front(self) -> None:
        """Test a counter-clockwise polygon lies in front of its own plane."""
        triangle = Polygon(1, (Point(0, 0), Point(4, 0), Point(2, 3)))
        partition = create_partition(triangle)
        assert signed_distance(Point(2, 3), partition) > 0

    def test_zero_length_edge_raises(self) -> None:
        polygon = Polygon(5, (Point(1, 1), Point(1, 1), Point(2, 2)))
        with pytest.raises(DegenerateEdgeError) as exc_info:
            create_partition(polygon)

        assert exc_info.value.polygon_id == 5
        assert isinstance(exc_info.value, GeometryError)

    def test_too_few_points_raises(self) -> None:
        with pytest.raises(InvalidPolygonError):
            create_partition(Polygon(1, (Point(0, 0),)))


class TestIntersectEdge:
    """Tests for intersect_edge."""

    def test_midpoint_crossing(self) -> None:
        crossing = intersect_edge(Point(0, -1), Point(0, 1), -1.0, 1.0)
        assert crossing == Point(0.0, 0.0)

    def test_uneven_crossing(self) -> None:
        crossing = intersect_edge(Point(0, 3), Point(4, -1), 3.0, -1.0)
        assert crossing.x == pytest.approx(3.0)
        assert crossing.y == pytest.approx(0.0)
