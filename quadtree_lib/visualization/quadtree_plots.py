"""Quadtree visualization for debugging and inspection."""

from typing import Dict, List, Optional

import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

from ..core.quadtree import QuadTreeNode
from ..core.reference import ReferencePoint
from ..analysis.query import get_leaf_nodes


DEPTH_COLORS = ["aquamarine", "beige", "fuchsia", "teal", "navy"]


def get_color(depth: int) -> str:
    """
    Color for a leaf at the given depth.

    Depths cycle through the palette; anything deeper than the palette
    length is drawn white.
    """
    if depth > len(DEPTH_COLORS):
        return "white"
    return DEPTH_COLORS[depth % len(DEPTH_COLORS)]


def leaf_primitives(tree: QuadTreeNode) -> List[Dict]:
    """
    Describe one visual primitive per leaf.

    Returns
    -------
    primitives : list of dict
        Each with 'center', 'half_length', 'depth' and 'color'
    """
    return [
        {
            "center": leaf.center.to_tuple(),
            "half_length": leaf.half_length,
            "depth": leaf.depth,
            "color": get_color(leaf.depth),
        }
        for leaf in get_leaf_nodes(tree)
    ]


def plot_quadtree(
    tree: QuadTreeNode,
    reference: Optional[ReferencePoint] = None,
    ax: Optional[plt.Axes] = None,
    show: bool = True,
    title: Optional[str] = None,
) -> plt.Axes:
    """
    Plot the leaves of a quadtree as colored squares.

    Parameters
    ----------
    tree : QuadTreeNode
        Root of the tree to plot
    reference : ReferencePoint, optional
        Reference state; its position and cached leaf are highlighted
    ax : matplotlib Axes, optional
        Existing axes
    show : bool
        Whether to call plt.show()
    title : str, optional
        Plot title

    Returns
    -------
    ax : matplotlib Axes
        Axes object
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 8))

    for primitive in leaf_primitives(tree):
        cx, cy = primitive["center"]
        h = primitive["half_length"]
        ax.add_patch(Rectangle(
            (cx - h, cy - h), 2 * h, 2 * h,
            facecolor=primitive["color"], edgecolor="black", linewidth=0.5, alpha=0.8,
        ))

    if reference is not None:
        bounds = reference.get_bounds()
        if bounds is not None:
            min_x, max_x, min_y, max_y = bounds.get_bounds()
            ax.add_patch(Rectangle(
                (min_x, min_y), max_x - min_x, max_y - min_y,
                fill=False, edgecolor="red", linewidth=2,
            ))
        ax.plot(reference.position.x, reference.position.y, "o", color="red", markersize=6)

    min_x, max_x, min_y, max_y = tree.get_bounds()
    ax.set_xlim(min_x, max_x)
    ax.set_ylim(min_y, max_y)
    ax.set_aspect("equal")
    ax.set_xlabel("X")
    ax.set_ylabel("Y")

    if title:
        ax.set_title(title)

    if show:
        plt.show()

    return ax
