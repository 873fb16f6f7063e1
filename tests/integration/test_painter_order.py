"""Integration tests for painter's-order rendering of whole scenes.

Tests build trees from the sample scene and from random scenes and verify:
- Every inserted polygon reaches the render order
- Far subtrees are always drawn before the node and near subtrees after
- Traversal visits every node exactly once for any viewpoint
"""

import random

import pytest

from bsptree.core import BSPTree, random_scene, sample_scene, signed_distance, square
from bsptree.domain import BSPNode, Point, Polygon

VIEWPOINTS = [
    Point(250, 450),
    Point(5, 50),
    Point(-300, -300),
    Point(600, 120),
    Point(250, 250),
    Point(100, 200),
]


def subtree_polygons(node: BSPNode | None) -> list[Polygon]:
    """All polygons stored at or below ``node``."""
    found: list[Polygon] = []
    stack = [node] if node is not None else []
    while stack:
        current = stack.pop()
        found.extend(current.polygons)
        stack.extend(child for child in (current.front, current.back) if child is not None)
    return found


def assert_painter_order(tree: BSPTree, viewpoint: Point) -> None:
    """Check the far-node-near ordering at every node of the tree."""
    position = {id(p): i for i, p in enumerate(tree.painter_order(viewpoint))}

    for node, _, _ in tree.walk():
        if signed_distance(viewpoint, node.partition) > 0:
            far, near = node.back, node.front
        else:
            far, near = node.front, node.back

        own = [position[id(p)] for p in node.polygons]
        far_positions = [position[id(p)] for p in subtree_polygons(far)]
        near_positions = [position[id(p)] for p in subtree_polygons(near)]

        assert all(f < min(own) for f in far_positions)
        assert all(n > max(own) for n in near_positions)


class TestSampleScene:
    """Tests against the four-square demonstration scene."""

    @pytest.fixture
    def tree(self) -> BSPTree:
        tree = BSPTree()
        tree.insert_many(sample_scene())
        return tree

    def test_structure(self, tree: BSPTree) -> None:
        stats = tree.stats()
        assert stats.node_count == 7
        assert stats.height == 4
        assert stats.polygon_count == 7
        assert stats.split_count == 3

    def test_order_from_default_viewpoint(self, tree: BSPTree) -> None:
        order = tree.painter_order(Point(250, 450))

        assert [p.id for p in order] == [-2, 1, -4, -1, -6, 3, -5]
        assert [p.origin_id for p in order] == [2, 1, 4, 2, 4, 3, 4]

    @pytest.mark.parametrize("viewpoint", VIEWPOINTS)
    def test_painter_property(self, tree: BSPTree, viewpoint: Point) -> None:
        assert_painter_order(tree, viewpoint)


class TestDisjointSquares:
    """Tests with squares separated by their own planes."""

    def test_farther_square_drawn_first(self) -> None:
        tree = BSPTree()
        tree.insert(square(1, 0, 0, 10))
        tree.insert(square(2, 0, 20, 10))
        tree.insert(square(3, 0, -30, 10))

        assert [p.id for p in tree.painter_order(Point(5, 50))] == [3, 1, 2]
        assert tree.height() == 2
        assert tree.count_nodes() == 3


class TestRandomScenes:
    """Property checks over seeded random scenes."""

    @pytest.mark.parametrize("seed", [0, 1, 7, 42, 1234])
    def test_every_polygon_rendered(self, seed: int) -> None:
        polygons = random_scene(30, seed=seed)
        tree = BSPTree()
        tree.insert_many(polygons)

        order = tree.painter_order(Point(250, 450))
        assert len(order) == tree.polygon_count()
        assert {p.origin_id for p in order} == {p.id for p in polygons}
        assert all(len(p.points) >= 3 for p in order)

    @pytest.mark.parametrize("seed", [3, 11, 99])
    def test_painter_property_holds(self, seed: int) -> None:
        tree = BSPTree()
        tree.insert_many(random_scene(25, seed=seed))

        rng = random.Random(seed)
        for _ in range(10):
            viewpoint = Point(rng.uniform(-100, 600), rng.uniform(-100, 600))
            assert_painter_order(tree, viewpoint)

    @pytest.mark.parametrize("seed", [5, 6])
    def test_visits_each_node_once(self, seed: int) -> None:
        tree = BSPTree()
        tree.insert_many(random_scene(25, seed=seed))

        for viewpoint in VIEWPOINTS:
            visited: list[BSPNode] = []
            tree.traverse_front_to_back(viewpoint, visited.append)
            assert len(visited) == tree.count_nodes()
            assert len({id(node) for node in visited}) == len(visited)

    def test_fragments_lie_in_their_region(self) -> None:
        """Test every stored polygon is on the correct side of each ancestor."""
        tree = BSPTree()
        tree.insert_many(random_scene(30, seed=2024))
        epsilon = tree.config.epsilon

        stack: list[tuple[BSPNode, list[tuple[BSPNode, str]]]] = [(tree.root, [])]  # type: ignore[list-item]
        while stack:
            node, ancestors = stack.pop()
            for polygon in node.polygons:
                for ancestor, side in ancestors:
                    for point in polygon.points:
                        dist = signed_distance(point, ancestor.partition)
                        if side == "front":
                            assert dist >= -epsilon
                        else:
                            assert dist <= epsilon
            for side in ("front", "back"):
                child = node.child(side)
                if child is not None:
                    stack.append((child, [*ancestors, (node, side)]))
