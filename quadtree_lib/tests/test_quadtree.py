"""
Tests for QuadTreeNode subdivision, bounds checks and leaf enumeration.
"""

import dataclasses
import pytest
import numpy as np
from quadtree_lib.core.quadtree import QuadTreeNode, MIN_HALF_LENGTH
from quadtree_lib.core.types import Point2D, CornerPosition, CHILD_ORDER, as_point


def test_new_node_is_leaf():
    """Test that a fresh node has no children."""
    node = QuadTreeNode((1.0, 2.0), 4.0, depth=2)

    assert node.is_leaf()
    assert node.get_children() is None
    assert node.get_depth() == 2
    assert node.get_half_length() == 4.0
    assert node.get_position() == Point2D(1.0, 2.0)


def test_subdivide_root(root):
    """Test the four children of a 16-unit root."""
    root.subdivide()
    children = root.get_children()

    assert len(children) == 4
    assert [c.get_position().to_tuple() for c in children] == [
        (8.0, 8.0),
        (8.0, -8.0),
        (-8.0, -8.0),
        (-8.0, 8.0),
    ]
    for child in children:
        assert child.get_half_length() == 8.0
        assert child.get_depth() == 1
        assert child.is_leaf()


def test_child_corner_order(root):
    """Test children are top-right, bottom-right, bottom-left, top-left."""
    root.subdivide()

    corners = [c.get_corner() for c in root.get_children()]
    assert corners == list(CHILD_ORDER)
    assert corners[0] == CornerPosition.TOP_RIGHT
    assert corners[3] == CornerPosition.TOP_LEFT
    assert root.get_corner() is None


def test_children_tile_parent():
    """Test the children exactly cover the parent with no overlap."""
    node = QuadTreeNode((3.0, -5.0), 6.0, depth=1)
    node.subdivide()

    bounds = np.array([c.get_bounds() for c in node.get_children()])
    p_min_x, p_max_x, p_min_y, p_max_y = node.get_bounds()

    assert bounds[:, 0].min() == pytest.approx(p_min_x)
    assert bounds[:, 1].max() == pytest.approx(p_max_x)
    assert bounds[:, 2].min() == pytest.approx(p_min_y)
    assert bounds[:, 3].max() == pytest.approx(p_max_y)

    child_area = np.sum((bounds[:, 1] - bounds[:, 0]) * (bounds[:, 3] - bounds[:, 2]))
    assert child_area == pytest.approx((2 * node.half_length) ** 2)

    for child in node.get_children():
        assert child.half_length == node.half_length / 2
        assert child.depth == node.depth + 1


def test_subdivide_resets_existing_children(root):
    """Test subdividing a branch replaces its subtree with fresh leaves."""
    root.subdivide()
    root.get_children()[0].subdivide()
    old_children = root.get_children()

    root.subdivide()

    assert root.get_children() is not old_children
    assert all(child.is_leaf() for child in root.get_children())
    assert root.get_size() == 4


def test_subdivide_below_minimum_is_noop():
    """Test subdivision stops at the minimum half-length."""
    node = QuadTreeNode((0.0, 0.0), MIN_HALF_LENGTH)
    node.subdivide()
    assert node.is_leaf()

    node = QuadTreeNode((0.0, 0.0), 2 * MIN_HALF_LENGTH)
    node.subdivide()
    assert not node.is_leaf()
    assert node.get_children()[0].half_length == MIN_HALF_LENGTH


def test_custom_min_half_length_is_inherited():
    """Test children inherit the subdivision threshold."""
    node = QuadTreeNode((0.0, 0.0), 16.0, min_half_length=4.0)
    node.subdivide_until_depth((1.0, 1.0), 10)

    assert max(leaf.depth for leaf in node.get_all_children()) == 2


def test_check_bounds_inclusive():
    """Test bounds are inclusive on both ends."""
    node = QuadTreeNode((0.0, 0.0), 2.0)

    assert node.check_bounds((0.0, 0.0))
    assert node.check_bounds((2.0, 2.0))
    assert node.check_bounds((-2.0, 2.0))
    assert node.check_bounds(Point2D(-2.0, -2.0))
    assert not node.check_bounds((2.0001, 0.0))
    assert not node.check_bounds((0.0, -3.0))


def test_shared_corner_in_all_children(root):
    """Test the origin is in bounds of all four children of the root."""
    root.subdivide()

    assert all(child.check_bounds((0.0, 0.0)) for child in root.get_children())


def test_get_all_children_leaf_returns_none():
    """Test a leaf has no children to enumerate."""
    node = QuadTreeNode((0.0, 0.0), 16.0)
    assert node.get_all_children() is None


def test_get_all_children_depth_first_order(root):
    """Test leaves come out depth-first in child-index order."""
    root.subdivide()
    root.get_children()[0].subdivide()

    leaves = root.get_all_children()

    assert len(leaves) == 7
    assert all(leaf.is_leaf() for leaf in leaves)
    assert [leaf.center.to_tuple() for leaf in leaves] == [
        (12.0, 12.0),
        (12.0, 4.0),
        (4.0, 4.0),
        (4.0, 12.0),
        (8.0, -8.0),
        (-8.0, -8.0),
        (-8.0, 8.0),
    ]
    assert [leaf.depth for leaf in leaves] == [2, 2, 2, 2, 1, 1, 1]


def test_subdivide_until_depth_follows_point(refined_tree):
    """Test only the branch containing the point is refined."""
    leaves = refined_tree.get_all_children()

    assert len(leaves) == 10
    deepest = [leaf for leaf in leaves if leaf.depth == 3]
    assert len(deepest) == 4

    containing = [leaf for leaf in leaves if leaf.check_bounds((10.0, 10.0))]
    assert len(containing) == 1
    assert containing[0].depth == 3
    assert containing[0].center.to_tuple() == (10.0, 10.0)
    assert containing[0].half_length == 2.0


def test_subdivide_until_depth_returns_terminal_snapshot(root):
    """Test the returned node is a detached copy at the target depth."""
    terminal = root.subdivide_until_depth((10.0, 10.0), 3)

    assert terminal.depth == 3
    assert terminal.check_bounds((10.0, 10.0))

    live = [leaf for leaf in root.get_all_children() if leaf.depth == 3 and leaf.check_bounds((10.0, 10.0))][0]
    assert terminal == live
    assert terminal is not live


def test_subdivide_until_depth_tie_refines_all_touching_branches(root):
    """Test a point on the shared corner refines all four quadrants."""
    root.subdivide_until_depth((0.0, 0.0), 2)
    leaves = root.get_all_children()

    assert len(leaves) == 16
    assert all(leaf.depth == 2 for leaf in leaves)
    containing = [leaf for leaf in leaves if leaf.check_bounds((0.0, 0.0))]
    assert sorted(leaf.center.to_tuple() for leaf in containing) == [
        (-4.0, -4.0), (-4.0, 4.0), (4.0, -4.0), (4.0, 4.0),
    ]


def test_subdivide_until_depth_stops_at_min_size(root):
    """Test refinement halts at the minimum size before a deep target."""
    terminal = root.subdivide_until_depth((10.3, 10.3), 9)
    leaves = root.get_all_children()

    assert max(leaf.depth for leaf in leaves) == 5
    assert terminal.depth == 5
    assert terminal.half_length == MIN_HALF_LENGTH
    assert terminal.check_bounds((10.3, 10.3))


def test_subdivide_until_depth_outside_point(root):
    """Test a point outside the root leaves only four plain children."""
    terminal = root.subdivide_until_depth((40.0, 0.0), 3)

    assert terminal is None
    assert root.get_size() == 4


def test_subdivide_until_depth_negative_target(root):
    """Test negative target depths are rejected."""
    with pytest.raises(ValueError, match="non-negative"):
        root.subdivide_until_depth((0.0, 0.0), -1)


def test_subdivide_until_depth_at_target_is_noop(root):
    """Test a node already at the target depth is left alone."""
    terminal = root.subdivide_until_depth((1.0, 1.0), 0)

    assert root.is_leaf()
    assert terminal == root


def test_clear_children(refined_tree):
    """Test clearing drops the subtree and leaves nothing to enumerate."""
    refined_tree.clear_children()

    assert refined_tree.is_leaf()
    assert refined_tree.get_all_children() is None
    assert refined_tree.get_size() == 1


def test_get_size_counts_leaves(refined_tree):
    """Test leaf count of a refined tree."""
    assert refined_tree.get_size() == len(refined_tree.get_all_children())


def test_copy_is_detached(refined_tree):
    """Test mutating a copy does not touch the original."""
    snapshot = refined_tree.copy()
    snapshot.clear_children()

    assert refined_tree.get_size() == 10
    assert snapshot.get_size() == 1


def test_dict_dump_rebuilds_tree(refined_tree):
    """Test a structural dump rebuilds an equal tree."""
    d = refined_tree.to_dict()

    assert d["depth"] == 0
    assert len(d["children"]) == 4
    assert d["children"][0]["corner"] == "top_right"
    assert d["children"][1]["children"] is None

    assert QuadTreeNode.from_dict(d) == refined_tree


def test_from_dict_rejects_partial_subdivision():
    """Test a branch with fewer than four children is rejected."""
    d = QuadTreeNode((0.0, 0.0), 4.0).to_dict()
    child = QuadTreeNode((2.0, 2.0), 2.0, depth=1).to_dict()
    d["children"] = [child, child, child]

    with pytest.raises(ValueError, match="exactly 4 children"):
        QuadTreeNode.from_dict(d)


def test_as_point_accepts_arrays_and_tuples():
    """Test point coercion."""
    assert as_point(np.array([1, 2])) == Point2D(1.0, 2.0)
    assert as_point([3, 4]) == Point2D(3.0, 4.0)

    with pytest.raises(ValueError):
        as_point((1.0, 2.0, 3.0))


def test_point_is_immutable():
    """Test Point2D fields cannot be reassigned."""
    p = as_point(Point2D(1.0, 2.0))

    with pytest.raises(dataclasses.FrozenInstanceError):
        p.x = 5.0

    assert p == Point2D(1.0, 2.0)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
