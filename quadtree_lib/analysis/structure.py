"""Structural analysis functions for quadtrees."""

from typing import Dict
import numpy as np
from ..core.quadtree import QuadTreeNode
from ..core.types import CHILD_ORDER
from ..core.result import OperationResult, ErrorCode
from .query import iter_nodes, get_leaf_nodes, get_max_depth, count_nodes, depth_histogram


def check_invariants(tree: QuadTreeNode, atol: float = 1e-9) -> OperationResult:
    """
    Verify the structural invariants of a quadtree.

    Checks, for every branch:
    - exactly four children
    - each child's half-length is half the parent's
    - child depth is parent depth + 1
    - children are in top-right, bottom-right, bottom-left, top-left order
    - children tile the parent region with no gap or overlap

    Parameters
    ----------
    tree : QuadTreeNode
        Root to check
    atol : float
        Absolute tolerance for coordinate comparisons

    Returns
    -------
    result : OperationResult
        Success if every invariant holds; failure listing each violation
        otherwise
    """
    errors = []
    checked = 0

    for node in iter_nodes(tree):
        if node.children is None:
            continue
        checked += 1
        label = f"node at {node.center.to_tuple()} (depth {node.depth})"

        if len(node.children) != 4:
            errors.append(f"{label} has {len(node.children)} children, expected 4")
            continue

        expected_half = node.half_length / 2.0
        for index, (child, corner) in enumerate(zip(node.children, CHILD_ORDER)):
            if child.depth != node.depth + 1:
                errors.append(f"{label} child {index} has depth {child.depth}")
            if not np.isclose(child.half_length, expected_half, atol=atol):
                errors.append(
                    f"{label} child {index} has half_length {child.half_length}, "
                    f"expected {expected_half}"
                )
            if child.corner is not None and child.corner != corner:
                errors.append(f"{label} child {index} is {child.corner.value}, expected {corner.value}")

            sx, sy = corner.signs
            expected_center = node.center.to_array() + expected_half * np.array([sx, sy])
            if not np.allclose(child.center.to_array(), expected_center, atol=atol):
                errors.append(
                    f"{label} child {index} center {child.center.to_tuple()} does not tile the parent"
                )

        # Union of the child boxes must equal the parent box
        bounds = np.array([child.get_bounds() for child in node.children])
        union = (bounds[:, 0].min(), bounds[:, 1].max(), bounds[:, 2].min(), bounds[:, 3].max())
        area = float(np.sum((bounds[:, 1] - bounds[:, 0]) * (bounds[:, 3] - bounds[:, 2])))
        if not np.allclose(union, node.get_bounds(), atol=atol) or \
                not np.isclose(area, (2.0 * node.half_length) ** 2, atol=atol):
            errors.append(f"{label} children do not exactly cover the parent region")

    if errors:
        result = OperationResult.failure(
            message=f"{len(errors)} invariant violation(s) found",
            metadata={"branches_checked": checked},
        )
        for error in errors:
            result.add_error(error, ErrorCode.INVARIANT_VIOLATION)
        return result

    return OperationResult.success(
        message=f"All invariants hold for {checked} branch(es)",
        metadata={"branches_checked": checked},
    )


def compute_tree_stats(tree: QuadTreeNode) -> Dict:
    """
    Compute summary statistics of a quadtree.

    Returns
    -------
    stats : dict
        Dictionary with node/leaf counts, max depth, depth histogram and the
        fraction of the root area covered by leaves at the max depth
    """
    leaves = get_leaf_nodes(tree)
    max_depth = get_max_depth(tree)
    finest = [leaf for leaf in leaves if leaf.depth == max_depth]
    root_area = (2.0 * tree.half_length) ** 2
    finest_area = sum((2.0 * leaf.half_length) ** 2 for leaf in finest)

    stats = {
        'num_nodes': count_nodes(tree),
        'num_leaves': len(leaves),
        'max_depth': max_depth,
        'depth_histogram': depth_histogram(tree),
        'min_half_length': float(min(leaf.half_length for leaf in leaves)),
        'finest_area_fraction': float(finest_area / root_area) if root_area > 0 else 0.0,
    }

    return stats
