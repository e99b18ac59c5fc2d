"""
Refinement driver: regrow the quadtree around a moving reference point.

The driver keeps a snapshot of the leaf that contained the reference point at
the last rebuild. As long as the point stays inside that leaf nothing
happens; once it leaves, the tree is regrown down to the target depth along
the branch holding the new position and the cache is refreshed.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from ..core.types import Point2D, PointLike, as_point
from ..core.quadtree import QuadTreeNode, MIN_HALF_LENGTH
from ..core.reference import ReferencePoint, REFERENCE_SPEED
from ..core.result import OperationResult, OperationStatus, ErrorCode
from ..analysis.query import get_leaf_nodes

logger = logging.getLogger(__name__)

TIE_BREAK_POLICIES = ("canonical", "enumeration")
REBUILD_POLICIES = ("full", "incremental")


@dataclass
class RefinementParams:
    """
    Parameters for adaptive quadtree refinement.

    The world region is a square of side ``2 * world_half_length`` centered
    on ``world_center``.
    """

    world_center: Tuple[float, float] = (0.0, 0.0)
    world_half_length: float = 16.0
    target_depth: int = 5
    min_half_length: float = MIN_HALF_LENGTH
    tie_break: str = "canonical"  # "canonical" or "enumeration"
    rebuild_policy: str = "full"  # "full" or "incremental"
    speed: float = REFERENCE_SPEED

    def create_root(self) -> QuadTreeNode:
        """Build the depth-0 root covering the world region."""
        return QuadTreeNode(
            self.world_center,
            self.world_half_length,
            depth=0,
            min_half_length=self.min_half_length,
        )

    def reachable_depth(self) -> int:
        """Deepest level the minimum size allows from the world root."""
        depth = 0
        half_length = self.world_half_length
        while half_length > self.min_half_length:
            half_length /= 2.0
            depth += 1
        return depth

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "world_center": list(self.world_center),
            "world_half_length": self.world_half_length,
            "target_depth": self.target_depth,
            "min_half_length": self.min_half_length,
            "tie_break": self.tie_break,
            "rebuild_policy": self.rebuild_policy,
            "speed": self.speed,
        }

    @classmethod
    def from_dict(cls, d: dict) -> "RefinementParams":
        """Create from dictionary."""
        return cls(
            world_center=tuple(d.get("world_center", (0.0, 0.0))),
            world_half_length=d.get("world_half_length", 16.0),
            target_depth=d.get("target_depth", 5),
            min_half_length=d.get("min_half_length", MIN_HALF_LENGTH),
            tie_break=d.get("tie_break", "canonical"),
            rebuild_policy=d.get("rebuild_policy", "full"),
            speed=d.get("speed", REFERENCE_SPEED),
        )


def find_containing_leaf(
    tree: QuadTreeNode,
    point: PointLike,
    tie_break: str = "canonical",
) -> Optional[QuadTreeNode]:
    """
    Find the deepest leaf whose bounds contain a point.

    Parameters
    ----------
    tree : QuadTreeNode
        Root of the tree to search
    point : Point2D or tuple
        Query position
    tie_break : str
        How to choose among equally deep candidates when the point sits on
        a shared edge or corner. "canonical" prefers the smallest center x,
        then the smallest center y. "enumeration" keeps the first candidate
        in leaf-enumeration order.

    Returns
    -------
    leaf : QuadTreeNode or None
        The selected leaf (a live node of the tree), or None if no leaf
        contains the point
    """
    if tie_break not in TIE_BREAK_POLICIES:
        raise ValueError(f"Unknown tie_break {tie_break!r}, expected one of {TIE_BREAK_POLICIES}")

    p = as_point(point)
    best = None
    for leaf in get_leaf_nodes(tree):
        if not leaf.check_bounds(p):
            continue
        if best is None or leaf.depth > best.depth:
            best = leaf
        elif leaf.depth == best.depth and tie_break == "canonical":
            if (leaf.center.x, leaf.center.y) < (best.center.x, best.center.y):
                best = leaf
    return best


def rebuild_tree(
    tree: QuadTreeNode,
    point: PointLike,
    target_depth: int,
) -> Optional[QuadTreeNode]:
    """
    Discard the whole tree and regrow it around a point.

    Returns the terminal node reported by ``subdivide_until_depth``.
    """
    tree.clear_children()
    return tree.subdivide_until_depth(point, target_depth)


def refine_incremental(
    tree: QuadTreeNode,
    point: PointLike,
    target_depth: int,
) -> None:
    """
    Regrow the tree around a point, reusing nodes still on the refined path.

    Leaves on the path are subdivided, nodes on the path keep their existing
    children, and branches that no longer contain the point are collapsed.
    The resulting structure equals the one ``rebuild_tree`` would produce.
    """
    if target_depth < 0:
        raise ValueError(f"target_depth must be non-negative, got {target_depth}")

    p = as_point(point)

    if tree.depth >= target_depth:
        tree.clear_children()
        return

    if tree.is_leaf():
        tree.subdivide()
        if tree.is_leaf():
            return

    for child in tree.get_children():
        if child.check_bounds(p):
            refine_incremental(child, p, target_depth)
        else:
            child.clear_children()


class RefinementDriver:
    """
    Policy layer that keeps the quadtree refined around a reference point.

    The root tree is injected and mutated in place; the driver never creates
    a module-level tree of its own.
    """

    def __init__(
        self,
        tree: Optional[QuadTreeNode] = None,
        params: Optional[RefinementParams] = None,
        reference: Optional[ReferencePoint] = None,
    ):
        """
        Initialize the driver.

        Parameters
        ----------
        tree : QuadTreeNode, optional
            Root to refine (built from ``params`` if omitted)
        params : RefinementParams, optional
            Refinement parameters (defaults if omitted)
        reference : ReferencePoint, optional
            Reference state (a point at the origin if omitted)
        """
        self.params = params or RefinementParams()
        if self.params.tie_break not in TIE_BREAK_POLICIES:
            raise ValueError(f"Unknown tie_break {self.params.tie_break!r}")
        if self.params.rebuild_policy not in REBUILD_POLICIES:
            raise ValueError(f"Unknown rebuild_policy {self.params.rebuild_policy!r}")

        self.tree = tree if tree is not None else self.params.create_root()
        self.reference = reference or ReferencePoint()

        self.step_count = 0
        self.rebuild_count = 0
        self._cached_target: Optional[int] = None  # target depth the cached leaf was resolved for

    @property
    def position(self) -> Point2D:
        return self.reference.position

    @property
    def current_bounds(self) -> Optional[QuadTreeNode]:
        return self.reference.get_bounds()

    def needs_rebuild(self, target_depth: Optional[int] = None) -> bool:
        """
        Check whether the tree must be regrown.

        True when the reference point has left its cached leaf, or when the
        cached leaf was resolved for a different target depth.
        """
        if target_depth is None:
            target_depth = self.params.target_depth
        if self._cached_target != target_depth:
            return True
        return not self.reference.is_in_bounds()

    def step(
        self,
        position: Optional[PointLike] = None,
        target_depth: Optional[int] = None,
    ) -> OperationResult:
        """
        Advance one step of the refinement loop.

        Parameters
        ----------
        position : Point2D or tuple, optional
            New reference position (keeps the current one if omitted)
        target_depth : int, optional
            Depth to refine to (``params.target_depth`` if omitted)

        Returns
        -------
        result : OperationResult
            metadata holds 'rebuilt', 'leaf_count', 'cached_depth' and
            'cached_center'
        """
        if target_depth is None:
            target_depth = self.params.target_depth
        if target_depth < 0:
            return OperationResult.failure(
                message=f"Invalid target depth {target_depth}",
                errors=["target_depth must be non-negative"],
                error_codes=[ErrorCode.INVALID_TARGET_DEPTH.value],
            )

        if position is not None:
            self.reference.set_position(position)
        self.step_count += 1
        p = self.reference.position

        if not self.needs_rebuild(target_depth):
            logger.debug("Reference %s still inside cached leaf", p.to_tuple())
            return self._result(OperationStatus.SUCCESS, rebuilt=False,
                                message="Reference point inside cached leaf")

        self.reference.clear_bounds()
        self._cached_target = None
        if self.params.rebuild_policy == "incremental":
            refine_incremental(self.tree, p, target_depth)
        else:
            rebuild_tree(self.tree, p, target_depth)
        self.rebuild_count += 1

        leaf = find_containing_leaf(self.tree, p, tie_break=self.params.tie_break)
        logger.info(
            "Rebuilt quadtree around %s to depth %d (%d leaves)",
            p.to_tuple(), target_depth, self.tree.get_size(),
        )

        if leaf is None:
            result = self._result(
                OperationStatus.FAILURE, rebuilt=True,
                message=f"Reference point {p.to_tuple()} is outside the world region",
            )
            result.add_error("No leaf contains the reference point", ErrorCode.OUTSIDE_REGION)
            logger.warning("Reference point %s is outside the world region", p.to_tuple())
            return result

        self.reference.set_bounds(leaf)
        self._cached_target = target_depth

        if leaf.depth < target_depth:
            result = self._result(
                OperationStatus.PARTIAL_SUCCESS, rebuilt=True,
                message=f"Refined to depth {leaf.depth} of {target_depth}",
            )
            result.add_warning(
                f"Minimum half-length {self.tree.min_half_length} reached at depth {leaf.depth}",
                ErrorCode.MIN_SIZE_REACHED,
            )
            return result

        return self._result(OperationStatus.SUCCESS, rebuilt=True,
                            message=f"Refined to depth {leaf.depth}")

    def move(self, direction: PointLike, target_depth: Optional[int] = None) -> OperationResult:
        """Move the reference point by ``direction * params.speed`` and step."""
        self.reference.move(direction, self.params.speed)
        return self.step(target_depth=target_depth)

    def reset(self) -> None:
        """Drop the tree's children and the cached leaf."""
        self.tree.clear_children()
        self.reference.clear_bounds()
        self._cached_target = None

    def _result(self, status: OperationStatus, rebuilt: bool, message: str) -> OperationResult:
        cached = self.reference.current_bounds
        return OperationResult(
            status=status,
            message=message,
            metadata={
                "rebuilt": rebuilt,
                "leaf_count": self.tree.get_size(),
                "cached_depth": cached.depth if cached is not None else None,
                "cached_center": cached.center.to_tuple() if cached is not None else None,
                "step": self.step_count,
            },
        )
