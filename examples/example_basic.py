"""
Basic example: refine a quadtree around a point and plot it.
"""

from quadtree_lib import QuadTreeNode, RefinementDriver, RefinementParams, format_tree
from quadtree_lib.visualization import plot_quadtree


def main():
    root = QuadTreeNode((0.0, 0.0), 16.0, depth=0)
    driver = RefinementDriver(tree=root, params=RefinementParams(target_depth=4))

    result = driver.step(position=(10.0, 10.0))
    print(result.message)
    print(f"Leaves: {result.metadata['leaf_count']}")
    print(f"Cached leaf: {driver.current_bounds}")

    print(format_tree(root))

    plot_quadtree(root, reference=driver.reference, title="Refined around (10, 10)")


if __name__ == "__main__":
    main()
