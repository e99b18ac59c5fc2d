"""
Query functions over quadtree structure.
"""

from typing import Dict, List, Iterator
import numpy as np
from ..core.quadtree import QuadTreeNode
from ..core.types import PointLike, as_point


def iter_nodes(tree: QuadTreeNode) -> Iterator[QuadTreeNode]:
    """Yield every node (branches and leaves), depth-first in child-index order."""
    stack = [tree]
    while stack:
        node = stack.pop()
        yield node
        if node.children is not None:
            stack.extend(reversed(node.children))


def get_leaf_nodes(tree: QuadTreeNode) -> List[QuadTreeNode]:
    """
    Get all leaves of the tree.

    Unlike ``QuadTreeNode.get_all_children``, a leaf root is returned as a
    one-element list instead of None.

    Parameters
    ----------
    tree : QuadTreeNode
        Root to query

    Returns
    -------
    leaves : List[QuadTreeNode]
        Leaves in enumeration order
    """
    leaves = tree.get_all_children()
    if leaves is None:
        return [tree]
    return leaves


def get_leaves_at_depth(tree: QuadTreeNode, depth: int) -> List[QuadTreeNode]:
    """Get the leaves sitting exactly at ``depth``."""
    return [leaf for leaf in get_leaf_nodes(tree) if leaf.depth == depth]


def get_max_depth(tree: QuadTreeNode) -> int:
    """Depth of the deepest leaf."""
    return max(leaf.depth for leaf in get_leaf_nodes(tree))


def count_nodes(tree: QuadTreeNode) -> int:
    """Total number of nodes, branches included."""
    return sum(1 for _ in iter_nodes(tree))


def depth_histogram(tree: QuadTreeNode) -> Dict[int, int]:
    """
    Count leaves per depth.

    Returns
    -------
    histogram : dict
        Mapping depth -> number of leaves at that depth
    """
    depths = np.array([leaf.depth for leaf in get_leaf_nodes(tree)], dtype=int)
    counts = np.bincount(depths)
    return {int(d): int(c) for d, c in enumerate(counts) if c > 0}


def find_leaves_containing(tree: QuadTreeNode, point: PointLike) -> List[QuadTreeNode]:
    """
    Get every leaf whose bounds contain a point.

    More than one leaf is returned when the point sits on a shared edge or
    corner.
    """
    p = as_point(point)
    return [leaf for leaf in get_leaf_nodes(tree) if leaf.check_bounds(p)]
