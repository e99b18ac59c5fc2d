"""Visualization helpers for quadtrees."""

from .quadtree_plots import get_color, leaf_primitives, plot_quadtree, DEPTH_COLORS

__all__ = ["get_color", "leaf_primitives", "plot_quadtree", "DEPTH_COLORS"]
