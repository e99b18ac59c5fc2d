"""
Recursive quadtree node over a square 2D region.

Each node covers ``[center - half_length, center + half_length]`` on both
axes and is either a leaf (``children is None``) or a branch holding exactly
four children that tile its region. Children are owned by their parent
only; there are no back references.
"""

import copy
from typing import List, Optional

from .types import Point2D, PointLike, CornerPosition, CHILD_ORDER, as_point


MIN_HALF_LENGTH = 0.5  # nodes at or below this half-length never subdivide


class QuadTreeNode:
    """
    A square region of space with at most four owned children.

    Children are ordered 0 = top-right, 1 = bottom-right, 2 = bottom-left,
    3 = top-left.
    """

    def __init__(
        self,
        center: PointLike,
        half_length: float,
        depth: int = 0,
        corner: Optional[CornerPosition] = None,
        min_half_length: float = MIN_HALF_LENGTH,
    ):
        """
        Initialize a leaf node.

        Parameters
        ----------
        center : Point2D or tuple
            Geometric center of the region
        half_length : float
            Half the side length of the region
        depth : int
            Distance from the root (root depth = 0)
        corner : CornerPosition, optional
            Quadrant of the parent this node occupies (None for the root)
        min_half_length : float
            Subdivision threshold inherited by every descendant
        """
        self.center = as_point(center)
        self.half_length = float(half_length)
        self.depth = depth
        self.corner = corner
        self.min_half_length = min_half_length
        self.children: Optional[List["QuadTreeNode"]] = None

    def __repr__(self) -> str:
        kind = "Leaf" if self.is_leaf() else "Branch"
        return (
            f"QuadTreeNode({kind}, center={self.center.to_tuple()}, "
            f"half_length={self.half_length}, depth={self.depth})"
        )

    def is_leaf(self) -> bool:
        """A node is a leaf iff it has no children."""
        return self.children is None

    def can_subdivide(self) -> bool:
        """Check whether the node is still above the minimum subdivision size."""
        return self.half_length > self.min_half_length

    def subdivide(self) -> None:
        """
        Replace this node's children with four fresh leaves.

        Existing children are discarded, not merged. A no-op when the node is
        at or below the minimum subdivision size.
        """
        if not self.can_subdivide():
            return

        child_half = self.half_length / 2.0
        child_depth = self.depth + 1

        children = []
        for corner in CHILD_ORDER:
            sx, sy = corner.signs
            children.append(
                QuadTreeNode(
                    Point2D(self.center.x + sx * child_half, self.center.y + sy * child_half),
                    child_half,
                    depth=child_depth,
                    corner=corner,
                    min_half_length=self.min_half_length,
                )
            )
        self.children = children

    def check_bounds(self, point: PointLike) -> bool:
        """
        Check whether a point lies inside this node's region.

        Both ends are inclusive, so a point on an edge shared by two siblings
        is reported as inside by both.
        """
        p = as_point(point)
        return (
            self.center.x - self.half_length <= p.x <= self.center.x + self.half_length
            and self.center.y - self.half_length <= p.y <= self.center.y + self.half_length
        )

    def get_children(self) -> Optional[List["QuadTreeNode"]]:
        """Get the four children, or None if this node is a leaf."""
        return self.children

    def get_all_children(self) -> Optional[List["QuadTreeNode"]]:
        """
        Collect every leaf below this node.

        Leaves are returned depth-first in child-index order. Branch nodes are
        never included.

        Returns
        -------
        leaves : list of QuadTreeNode or None
            None when this node is itself a leaf
        """
        if self.children is None:
            return None

        leaves = []
        for child in self.children:
            if child.children is not None:
                leaves.extend(child.get_all_children())
            else:
                leaves.append(child)
        return leaves

    def subdivide_until_depth(
        self,
        point: PointLike,
        target_depth: int,
    ) -> Optional["QuadTreeNode"]:
        """
        Refine the tree down to ``target_depth`` along the branch holding ``point``.

        This node is always re-subdivided (existing children are reset).
        Only children whose bounds contain the point are refined further; a
        point on a shared edge refines every child that touches it.

        Parameters
        ----------
        point : Point2D or tuple
            Reference position to refine around
        target_depth : int
            Depth at which refinement stops

        Returns
        -------
        node : QuadTreeNode or None
            Snapshot of the first terminal node reached, or None if no child
            contains the point
        """
        if target_depth < 0:
            raise ValueError(f"target_depth must be non-negative, got {target_depth}")

        p = as_point(point)

        if self.depth >= target_depth:
            return self.copy()

        self.subdivide()
        if self.children is None:
            # Minimum size reached before the target depth
            return self.copy()

        resolved = None
        for child in self.children:
            if child.check_bounds(p):
                terminal = child.subdivide_until_depth(p, target_depth)
                if resolved is None:
                    resolved = terminal
        return resolved

    def clear_children(self) -> None:
        """Discard the whole subtree below this node."""
        self.children = None

    def get_depth(self) -> int:
        return self.depth

    def get_half_length(self) -> float:
        return self.half_length

    def get_position(self) -> Point2D:
        return self.center

    def get_corner(self) -> Optional[CornerPosition]:
        return self.corner

    def get_bounds(self) -> tuple:
        """Get bounding box (min_x, max_x, min_y, max_y)."""
        return (
            self.center.x - self.half_length,
            self.center.x + self.half_length,
            self.center.y - self.half_length,
            self.center.y + self.half_length,
        )

    def get_size(self) -> int:
        """Number of leaves in this subtree (1 for a leaf)."""
        if self.children is None:
            return 1
        return sum(child.get_size() for child in self.children)

    def copy(self) -> "QuadTreeNode":
        """Create a detached deep copy of this node and its subtree."""
        return copy.deepcopy(self)

    def __eq__(self, other) -> bool:
        if not isinstance(other, QuadTreeNode):
            return NotImplemented
        return (
            self.center == other.center
            and self.half_length == other.half_length
            and self.depth == other.depth
            and self.corner == other.corner
            and self.children == other.children
        )

    __hash__ = None

    def to_dict(self) -> dict:
        """Convert to dictionary, recursing into children."""
        return {
            "center": self.center.to_dict(),
            "half_length": self.half_length,
            "depth": self.depth,
            "corner": self.corner.value if self.corner is not None else None,
            "min_half_length": self.min_half_length,
            "children": (
                [child.to_dict() for child in self.children]
                if self.children is not None else None
            ),
        }

    @classmethod
    def from_dict(cls, d: dict) -> "QuadTreeNode":
        """Create from dictionary."""
        node = cls(
            center=Point2D.from_dict(d["center"]),
            half_length=d["half_length"],
            depth=d["depth"],
            corner=CornerPosition(d["corner"]) if d.get("corner") is not None else None,
            min_half_length=d.get("min_half_length", MIN_HALF_LENGTH),
        )
        children = d.get("children")
        if children is not None:
            if len(children) != 4:
                raise ValueError(f"A branch must have exactly 4 children, got {len(children)}")
            node.children = [cls.from_dict(c) for c in children]
        return node
