"""Debug dump utilities for quadtrees."""

from .dump import tree_to_json, dump_json, format_tree, SCHEMA_VERSION

__all__ = ["tree_to_json", "dump_json", "format_tree", "SCHEMA_VERSION"]
