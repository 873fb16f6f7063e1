"""Tree node representation."""

from dataclasses import dataclass, field

from bsptree.domain.geometry import Partition, Polygon


@dataclass(eq=False)
class BSPNode:
    """A node of a BSP tree.

    Each node owns its partition, an optional child on either side of it,
    and the polygons found to lie on its plane. Nodes compare by identity.

    Attributes:
        partition: Splitting plane of this node
        front: Subtree in the half-space the normal points into
        back: Subtree in the opposite half-space
        polygons: Polygons coplanar with the partition, in arrival order
    """

    partition: Partition
    front: "BSPNode | None" = None
    back: "BSPNode | None" = None
    polygons: list[Polygon] = field(default_factory=list)

    @property
    def is_leaf(self) -> bool:
        return self.front is None and self.back is None

    def child(self, side: str) -> "BSPNode | None":
        """Get the child on ``side`` ("front" or "back")."""
        return self.front if side == "front" else self.back

    def set_child(self, side: str, node: "BSPNode | None") -> None:
        if side == "front":
            self.front = node
        else:
            self.back = node
