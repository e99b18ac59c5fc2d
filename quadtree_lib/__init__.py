"""
Quadtree LOD Library - adaptive quadtree refinement around a moving point

Maintains a square spatial subdivision of a bounded 2D world and keeps it
refined around a reference position for level-of-detail rendering.

Key Features:
- Recursive quadtree nodes with fixed child ordering and exact tiling
- Refine-on-demand driver that only rebuilds when the point leaves its cell
- Structured results with status, warnings and error codes
- Parameter presets and validation
- Debug dumps, NetworkX export and matplotlib plots

Example Usage:
    from quadtree_lib import RefinementDriver, get_preset

    driver = RefinementDriver(params=get_preset("default_world"))
    result = driver.step(position=(10.0, 10.0), target_depth=3)
    leaf = driver.current_bounds
"""

__version__ = "0.1.0"

from .core.types import Point2D, CornerPosition
from .core.quadtree import QuadTreeNode, MIN_HALF_LENGTH
from .core.reference import ReferencePoint
from .core.result import OperationResult, OperationStatus, ErrorCode

from .ops.refine import (
    RefinementDriver,
    RefinementParams,
    find_containing_leaf,
    rebuild_tree,
    refine_incremental,
)

from .analysis.query import get_leaf_nodes, depth_histogram, find_leaves_containing
from .analysis.structure import check_invariants, compute_tree_stats

from .params import get_preset, list_presets, validate_params

from .io.dump import format_tree, tree_to_json, dump_json

__all__ = [
    "Point2D",
    "CornerPosition",
    "QuadTreeNode",
    "MIN_HALF_LENGTH",
    "ReferencePoint",
    "OperationResult",
    "OperationStatus",
    "ErrorCode",
    "RefinementDriver",
    "RefinementParams",
    "find_containing_leaf",
    "rebuild_tree",
    "refine_incremental",
    "get_leaf_nodes",
    "depth_histogram",
    "find_leaves_containing",
    "check_invariants",
    "compute_tree_stats",
    "get_preset",
    "list_presets",
    "validate_params",
    "format_tree",
    "tree_to_json",
    "dump_json",
]
