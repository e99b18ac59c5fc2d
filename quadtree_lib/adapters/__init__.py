"""Adapters for integrating quadtrees with external graph tooling."""

from .networkx_adapter import to_networkx_graph, node_at_path

__all__ = [
    "to_networkx_graph",
    "node_at_path",
]
