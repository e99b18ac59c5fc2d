"""
Adapter for converting a quadtree into a NetworkX graph.

Useful for inspecting tree structure with NetworkX traversal and layout
tools.
"""

import networkx as nx
from typing import Dict, Tuple
from ..core.quadtree import QuadTreeNode


def to_networkx_graph(tree: QuadTreeNode) -> Tuple[nx.DiGraph, Dict[int, Tuple[int, ...]]]:
    """
    Convert a quadtree to a directed NetworkX graph.

    Edges point from parent to child. The resulting graph has node
    attributes:
    - 'center': [x, y] position as list
    - 'half_length': float half side length
    - 'depth': int depth
    - 'corner': str quadrant name (None for the root)
    - 'is_leaf': bool

    And edge attributes:
    - 'child_index': int position of the child in its parent (0-3)

    Parameters
    ----------
    tree : QuadTreeNode
        Root of the tree to convert

    Returns
    -------
    G : nx.DiGraph
        NetworkX graph representation (root has id 0)
    node_paths : dict
        Mapping from NetworkX node IDs to the child-index path from the root
    """
    G = nx.DiGraph()
    node_paths = {}

    stack = [(tree, (), None)]
    while stack:
        node, path, parent_id = stack.pop()
        nx_id = len(node_paths)
        node_paths[nx_id] = path

        G.add_node(
            nx_id,
            center=[node.center.x, node.center.y],
            half_length=node.half_length,
            depth=node.depth,
            corner=node.corner.value if node.corner is not None else None,
            is_leaf=node.is_leaf(),
        )
        if parent_id is not None:
            G.add_edge(parent_id, nx_id, child_index=path[-1])

        if node.children is not None:
            for index in reversed(range(len(node.children))):
                stack.append((node.children[index], path + (index,), nx_id))

    return G, node_paths


def node_at_path(tree: QuadTreeNode, path: Tuple[int, ...]) -> QuadTreeNode:
    """
    Walk a child-index path from the root.

    Raises
    ------
    ValueError
        If the path descends below a leaf
    """
    node = tree
    for index in path:
        children = node.get_children()
        if children is None:
            raise ValueError(f"Path {path} descends below leaf at depth {node.depth}")
        node = children[index]
    return node
