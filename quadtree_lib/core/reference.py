"""
Reference point state tracked by the refinement driver.
"""

from typing import Optional
from .types import Point2D, PointLike, as_point
from .quadtree import QuadTreeNode


REFERENCE_SPEED = 0.025  # world units per unit of direction per step


class ReferencePoint:
    """
    Moving reference position plus a snapshot of the leaf that contains it.

    The cached leaf is a copy taken when the tree was last regrown; it is
    replaced, never mutated, and does not follow later changes to the tree.
    """

    def __init__(self, position: PointLike = (0.0, 0.0)):
        self.position = as_point(position)
        self.current_bounds: Optional[QuadTreeNode] = None

    def __repr__(self) -> str:
        cached = self.current_bounds.get_depth() if self.current_bounds is not None else None
        return f"ReferencePoint(position={self.position.to_tuple()}, cached_depth={cached})"

    def move(self, direction: PointLike, speed: float = REFERENCE_SPEED) -> None:
        """Shift the position by ``direction * speed``."""
        d = as_point(direction)
        self.position = Point2D(
            self.position.x + d.x * speed,
            self.position.y + d.y * speed,
        )

    def set_position(self, position: PointLike) -> None:
        self.position = as_point(position)

    def reset_position(self) -> None:
        """Return to the origin and forget the cached leaf."""
        self.position = Point2D(0.0, 0.0)
        self.current_bounds = None

    def set_bounds(self, bounds: QuadTreeNode) -> None:
        """Cache a snapshot of the leaf containing the position."""
        self.current_bounds = bounds.copy()

    def get_bounds(self) -> Optional[QuadTreeNode]:
        """Get a copy of the cached leaf (None if nothing is cached)."""
        if self.current_bounds is None:
            return None
        return self.current_bounds.copy()

    def clear_bounds(self) -> None:
        self.current_bounds = None

    def is_in_bounds(self) -> bool:
        """Check if the position is still inside the cached leaf (False if none cached)."""
        if self.current_bounds is None:
            return False
        return self.current_bounds.check_bounds(self.position)

    def to_dict(self) -> dict:
        """Convert to dictionary for debug inspection."""
        return {
            "position": self.position.to_dict(),
            "current_bounds": (
                self.current_bounds.to_dict() if self.current_bounds is not None else None
            ),
        }
