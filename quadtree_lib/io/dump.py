"""
Debug dumps of quadtree structure.

Dumps are for inspection only; there is deliberately no loader.
"""

import json
from pathlib import Path
from typing import Optional, Union
from ..core.quadtree import QuadTreeNode
from ..core.reference import ReferencePoint


SCHEMA_VERSION = "1.0"


def tree_to_json(
    tree: QuadTreeNode,
    reference: Optional[ReferencePoint] = None,
    indent: int = 2,
) -> str:
    """
    Serialize the full tree (and optionally the reference state) to JSON.

    Parameters
    ----------
    tree : QuadTreeNode
        Root to dump
    reference : ReferencePoint, optional
        Reference state to include alongside the tree
    indent : int
        JSON indentation level
    """
    data = {
        "schema_version": SCHEMA_VERSION,
        "tree": tree.to_dict(),
    }
    if reference is not None:
        data["reference"] = reference.to_dict()
    return json.dumps(data, indent=indent)


def dump_json(
    tree: QuadTreeNode,
    filepath: Union[str, Path],
    reference: Optional[ReferencePoint] = None,
    indent: int = 2,
) -> None:
    """
    Write a JSON debug dump of the tree to a file.

    Example
    -------
    >>> from quadtree_lib.io import dump_json
    >>> dump_json(driver.tree, "tree_dump.json", reference=driver.reference)
    """
    filepath = Path(filepath)

    with open(filepath, 'w') as f:
        f.write(tree_to_json(tree, reference=reference, indent=indent))


def format_tree(tree: QuadTreeNode, indent: str = "  ") -> str:
    """
    Render the tree as indented text, one node per line.

    Example output::

        Branch center=(0.0, 0.0) half_length=16.0 depth=0
          Leaf [top_right] center=(8.0, 8.0) half_length=8.0 depth=1
          ...
    """
    lines = []
    _format_node(tree, 0, indent, lines)
    return "\n".join(lines)


def _format_node(node: QuadTreeNode, level: int, indent: str, lines: list) -> None:
    kind = "Leaf" if node.is_leaf() else "Branch"
    corner = f" [{node.corner.value}]" if node.corner is not None else ""
    lines.append(
        f"{indent * level}{kind}{corner} center={node.center.to_tuple()} "
        f"half_length={node.half_length} depth={node.depth}"
    )
    if node.children is not None:
        for child in node.children:
            _format_node(child, level + 1, indent, lines)
