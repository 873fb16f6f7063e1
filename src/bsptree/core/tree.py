"""BSP tree construction and painter's-order traversal.

The tree grows one polygon at a time. Each insert walks down from the root,
classifying the polygon against every partition it meets:

- COPLANAR polygons join the node's polygon list
- FRONT and BACK polygons descend, or become a new leaf where the branch is empty
- SPANNING polygons are split and both fragments are re-classified against
  the same node

Traversal orders nodes back to front for a viewpoint, so drawing their
polygons in sequence overdraws farther surfaces with nearer ones.

Insertion, traversal and the structural queries all use explicit stacks,
so tree depth is never limited by the interpreter's recursion limit.
"""

import logging
from collections.abc import Callable, Iterable, Iterator

from bsptree.config import TreeConfig
from bsptree.core.classify import Classification, classify_polygon
from bsptree.core.clipping import MIN_VERTICES, split_polygon
from bsptree.core.geometry import create_partition, signed_distance
from bsptree.domain import BSPNode, Point, Polygon
from bsptree.exceptions import (
    BSPTreeError,
    InvalidPolygonError,
    InvalidPolygonIdError,
    SplitDepthExceededError,
)
from bsptree.utils import TreeStats

logger = logging.getLogger(__name__)

Visitor = Callable[[BSPNode], None]


class BSPTree:
    """A 2D binary space partitioning tree over polygons.

    The tree is the only entry point for mutating and querying its nodes.
    It is not thread-safe: an insert must not run concurrently with another
    insert or with a traversal of the same tree.

    Example:
        tree = BSPTree()
        tree.insert(Polygon(1, [Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)]))
        for polygon in tree.painter_order(Point(5, 50)):
            draw(polygon)
    """

    def __init__(self, config: TreeConfig | None = None) -> None:
        """Initialize an empty tree.

        Args:
            config: Tree construction settings (defaults if None)
        """
        self.config = config or TreeConfig()
        self.root: BSPNode | None = None
        self._next_fragment_id = -1
        self._inserted = 0
        self._splits = 0
        self._discarded = 0

    @property
    def is_empty(self) -> bool:
        return self.root is None

    def clear(self) -> None:
        """Discard every node. The tree can be reused afterwards."""
        self.root = None
        self._next_fragment_id = -1
        self._inserted = 0
        self._splits = 0
        self._discarded = 0

    def insert(self, polygon: Polygon) -> None:
        """Insert a polygon, splitting it where it spans a partition.

        The insert is atomic: if it fails, the tree is left exactly as it
        was before the call. Fragments created by splitting get negative
        identifiers (-1, -2, ...) unless ``fresh_fragment_ids`` is off, so
        caller identifiers must be non-negative.

        Args:
            polygon: Polygon with at least three vertices

        Raises:
            InvalidPolygonError: If the polygon has fewer than three vertices
            InvalidPolygonIdError: If the polygon id is negative
            DegenerateEdgeError: If a polygon or fragment that must start a new
                leaf has a zero-length leading edge
            SplitDepthExceededError: If a fragment keeps spanning the same
                plane beyond ``max_split_depth`` splits
        """
        if len(polygon.points) < MIN_VERTICES:
            raise InvalidPolygonError(polygon.id, len(polygon.points))
        if polygon.id < 0:
            raise InvalidPolygonIdError(polygon.id)

        # Validates the leading edge before anything is touched.
        partition = create_partition(polygon)

        saved = (self._next_fragment_id, self._splits, self._discarded)

        if self.root is None:
            self.root = BSPNode(partition, polygons=[polygon])
            self._inserted += 1
            logger.debug("Created root from polygon %s", polygon.id)
            return

        undo: list[Callable[[], None]] = []
        try:
            self._insert_from(self.root, polygon, undo)
        except BSPTreeError:
            for action in reversed(undo):
                action()
            self._next_fragment_id, self._splits, self._discarded = saved
            logger.debug(
                "Rolled back insert of polygon %s (%d changes)", polygon.id, len(undo)
            )
            raise

        self._inserted += 1

    def insert_many(self, polygons: Iterable[Polygon]) -> int:
        """Insert polygons in order.

        Returns:
            Number of polygons inserted
        """
        count = 0
        for polygon in polygons:
            self.insert(polygon)
            count += 1
        return count

    def _mint_id(self) -> int:
        # Fragments count down from -1 so they never collide with caller ids
        new_id = self._next_fragment_id
        self._next_fragment_id -= 1
        return new_id

    def _insert_from(
        self, start: BSPNode, polygon: Polygon, undo: list[Callable[[], None]]
    ) -> None:
        """Route a polygon and its fragments down from ``start``.

        Every structural change is recorded in ``undo`` so the caller can
        revert a failed insert.
        """
        epsilon = self.config.epsilon
        max_depth = self.config.max_split_depth
        id_factory = self._mint_id if self.config.fresh_fragment_ids else None

        # (node, polygon, split depth); fragments are processed front first
        stack: list[tuple[BSPNode, Polygon, int]] = [(start, polygon, 0)]

        while stack:
            node, current, depth = stack.pop()
            classification = classify_polygon(current, node.partition, epsilon)

            if classification is Classification.COPLANAR:
                node.polygons.append(current)
                undo.append(node.polygons.pop)

            elif classification is Classification.SPANNING:
                if depth >= max_depth:
                    raise SplitDepthExceededError(current.origin_id, depth)

                result = split_polygon(current, node.partition, id_factory)
                self._splits += 1
                self._discarded += 2 - len(result.fragments)
                logger.debug(
                    "Split polygon %s into %s at depth %d",
                    current.id,
                    [f.id for f in result.fragments],
                    depth,
                )
                for fragment in reversed(result.fragments):
                    stack.append((node, fragment, depth + 1))

            else:
                side = "front" if classification is Classification.FRONT else "back"
                child = node.child(side)
                if child is not None:
                    stack.append((child, current, depth))
                    continue

                leaf = BSPNode(create_partition(current), polygons=[current])
                node.set_child(side, leaf)
                undo.append(lambda node=node, side=side: node.set_child(side, None))
                logger.debug("Created %s leaf for polygon %s", side, current.id)

    def iter_front_to_back(self, viewpoint: Point) -> Iterator[BSPNode]:
        """Yield nodes in painter's order for a viewpoint.

        At each node the subtree on the far side of the partition comes
        first, then the node itself, then the subtree on the viewer's side.
        A viewpoint exactly on a plane is treated as behind it.

        Args:
            viewpoint: Position of the viewer

        Yields:
            Every node exactly once, farthest first
        """
        if self.root is None:
            return

        # (node, ready) - a node is yielded once its far subtree is done
        stack: list[tuple[BSPNode, bool]] = [(self.root, False)]

        while stack:
            node, ready = stack.pop()
            if ready:
                yield node
                continue

            if signed_distance(viewpoint, node.partition) > 0:
                far, near = node.back, node.front
            else:
                far, near = node.front, node.back

            if near is not None:
                stack.append((near, False))
            stack.append((node, True))
            if far is not None:
                stack.append((far, False))

    def traverse_front_to_back(self, viewpoint: Point, visit: Visitor) -> None:
        """Call ``visit`` on every node in painter's order.

        Args:
            viewpoint: Position of the viewer
            visit: Receives each node; its ``polygons`` and ``partition``
                are what a renderer draws
        """
        for node in self.iter_front_to_back(viewpoint):
            visit(node)

    def painter_order(self, viewpoint: Point) -> list[Polygon]:
        """Flatten the traversal into the polygon render order.

        Args:
            viewpoint: Position of the viewer

        Returns:
            Polygons to draw in sequence, farthest first
        """
        order: list[Polygon] = []
        for node in self.iter_front_to_back(viewpoint):
            order.extend(node.polygons)
        return order

    def walk(self) -> Iterator[tuple[BSPNode, int, str]]:
        """Yield ``(node, depth, side)`` in pre-order, front before back.

        The root has depth 0 and side "root".
        """
        if self.root is None:
            return

        stack: list[tuple[BSPNode, int, str]] = [(self.root, 0, "root")]
        while stack:
            node, depth, side = stack.pop()
            yield node, depth, side
            if node.back is not None:
                stack.append((node.back, depth + 1, "back"))
            if node.front is not None:
                stack.append((node.front, depth + 1, "front"))

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path (0 when empty)."""
        return max((depth + 1 for _, depth, _ in self.walk()), default=0)

    def count_nodes(self) -> int:
        """Total number of nodes."""
        return sum(1 for _ in self.walk())

    def polygon_count(self) -> int:
        """Total number of polygons and fragments stored in the tree."""
        return sum(len(node.polygons) for node, _, _ in self.walk())

    def stats(self) -> TreeStats:
        """Collect structural statistics."""
        return TreeStats(
            height=self.height(),
            node_count=self.count_nodes(),
            polygon_count=self.polygon_count(),
            inserted_count=self._inserted,
            split_count=self._splits,
            discarded_fragments=self._discarded,
        )

    def __len__(self) -> int:
        return self.count_nodes()

    def __repr__(self) -> str:
        return f"BSPTree(nodes={self.count_nodes()}, height={self.height()})"
