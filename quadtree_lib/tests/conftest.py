import matplotlib
matplotlib.use("Agg")

import pytest
from quadtree_lib.core.quadtree import QuadTreeNode
from quadtree_lib.ops.refine import RefinementDriver, RefinementParams


@pytest.fixture
def root():
    """World root centered at the origin with half-length 16."""
    return QuadTreeNode((0.0, 0.0), 16.0, depth=0)


@pytest.fixture
def refined_tree(root):
    """Root refined to depth 3 around (10, 10)."""
    root.subdivide_until_depth((10.0, 10.0), 3)
    return root


@pytest.fixture
def driver():
    """Driver over the default 16-unit world."""
    return RefinementDriver(params=RefinementParams())
