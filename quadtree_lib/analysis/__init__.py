"""Analysis functions for quadtree structure."""

from .query import (
    iter_nodes,
    get_leaf_nodes,
    get_leaves_at_depth,
    get_max_depth,
    count_nodes,
    depth_histogram,
    find_leaves_containing,
)
from .structure import check_invariants, compute_tree_stats

__all__ = [
    "iter_nodes",
    "get_leaf_nodes",
    "get_leaves_at_depth",
    "get_max_depth",
    "count_nodes",
    "depth_histogram",
    "find_leaves_containing",
    "check_invariants",
    "compute_tree_stats",
]
