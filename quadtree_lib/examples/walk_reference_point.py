"""
Walk a reference point across the world and keep the quadtree refined.

A scripted stand-in for keyboard input: each frame the point moves in a
fixed direction and the driver regrows the tree only when the point leaves
its current leaf.
"""

import logging

from quadtree_lib.ops.refine import RefinementDriver
from quadtree_lib.params import get_preset, validate_and_warn
from quadtree_lib.analysis.structure import check_invariants, compute_tree_stats
from quadtree_lib.io.dump import format_tree


# (direction, frames) legs of the scripted walk
WALK = [
    ((1.0, 0.0), 40),
    ((0.0, 1.0), 40),
    ((-1.0, -1.0), 80),
]


def main():
    """Run the scripted walk."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    params = validate_and_warn(get_preset("shallow_debug"))
    driver = RefinementDriver(params=params)

    print("=" * 60)
    print("QUADTREE REFINEMENT WALK")
    print("=" * 60)

    result = driver.step()
    print(f"\nInitial step: {result.message}")

    for direction, frames in WALK:
        for _ in range(frames):
            result = driver.move(direction)
            if result.is_failure():
                print(f"  frame {driver.step_count}: {result.message}")

    print(f"\nSteps: {driver.step_count}, rebuilds: {driver.rebuild_count}")
    print(f"Final position: {driver.position.to_tuple()}")
    print(f"Cached leaf: {driver.current_bounds}")

    invariants = check_invariants(driver.tree)
    print(f"\nInvariants: {invariants.message}")

    stats = compute_tree_stats(driver.tree)
    print(f"Leaves: {stats['num_leaves']}, depth histogram: {stats['depth_histogram']}")

    print("\nTree:")
    print(format_tree(driver.tree))


if __name__ == "__main__":
    main()
