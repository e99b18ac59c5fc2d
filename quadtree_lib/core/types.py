"""
Geometric primitive types for quadtree regions.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Tuple, Union
import numpy as np


@dataclass(frozen=True)
class Point2D:
    """2D point in the plane of the world region (immutable)."""

    x: float
    y: float

    def to_array(self) -> np.ndarray:
        """Convert to numpy array."""
        return np.array([self.x, self.y])

    @classmethod
    def from_array(cls, arr: np.ndarray) -> "Point2D":
        """Create from numpy array."""
        return cls(float(arr[0]), float(arr[1]))

    def to_tuple(self) -> Tuple[float, float]:
        """Convert to tuple."""
        return (self.x, self.y)

    @classmethod
    def from_tuple(cls, t: Sequence[float]) -> "Point2D":
        """Create from tuple."""
        return cls(float(t[0]), float(t[1]))

    def distance_to(self, other: "Point2D") -> float:
        """Compute Euclidean distance to another point."""
        dx = self.x - other.x
        dy = self.y - other.y
        return float(np.sqrt(dx**2 + dy**2))

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, d: dict) -> "Point2D":
        """Create from dictionary."""
        return cls(d["x"], d["y"])


PointLike = Union[Point2D, Tuple[float, float], Sequence[float], np.ndarray]


def as_point(point: PointLike) -> Point2D:
    """
    Coerce a point-like value into a Point2D.

    Accepts a Point2D, a 2-tuple/list, or a numpy array of shape (2,).
    """
    if isinstance(point, Point2D):
        return point
    if isinstance(point, np.ndarray):
        if point.shape != (2,):
            raise ValueError(f"Expected point array of shape (2,), got {point.shape}")
        return Point2D.from_array(point)
    if len(point) != 2:
        raise ValueError(f"Expected 2 coordinates, got {len(point)}")
    return Point2D.from_tuple(point)


class CornerPosition(Enum):
    """Quadrant a child node occupies inside its parent (+y is top, +x is right)."""
    TOP_RIGHT = "top_right"
    BOTTOM_RIGHT = "bottom_right"
    BOTTOM_LEFT = "bottom_left"
    TOP_LEFT = "top_left"

    @property
    def signs(self) -> Tuple[int, int]:
        """Offset direction (sx, sy) of this corner from the parent center."""
        return _CORNER_SIGNS[self]


# Child index order: 0 = top-right, 1 = bottom-right, 2 = bottom-left, 3 = top-left
CHILD_ORDER = (
    CornerPosition.TOP_RIGHT,
    CornerPosition.BOTTOM_RIGHT,
    CornerPosition.BOTTOM_LEFT,
    CornerPosition.TOP_LEFT,
)

_CORNER_SIGNS = {
    CornerPosition.TOP_RIGHT: (1, 1),
    CornerPosition.BOTTOM_RIGHT: (1, -1),
    CornerPosition.BOTTOM_LEFT: (-1, -1),
    CornerPosition.TOP_LEFT: (-1, 1),
}
