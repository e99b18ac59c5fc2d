"""Core data structures for quadtree level-of-detail indexing."""

from .types import Point2D, CornerPosition, CHILD_ORDER, as_point
from .quadtree import QuadTreeNode, MIN_HALF_LENGTH
from .reference import ReferencePoint, REFERENCE_SPEED
from .result import OperationResult, OperationStatus, ErrorCode

__all__ = [
    "Point2D",
    "CornerPosition",
    "CHILD_ORDER",
    "as_point",
    "QuadTreeNode",
    "MIN_HALF_LENGTH",
    "ReferencePoint",
    "REFERENCE_SPEED",
    "OperationResult",
    "OperationStatus",
    "ErrorCode",
]
