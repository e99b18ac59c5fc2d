"""Operations for refining quadtrees around a moving reference point."""

from .refine import (
    RefinementDriver,
    RefinementParams,
    find_containing_leaf,
    rebuild_tree,
    refine_incremental,
)

__all__ = [
    "RefinementDriver",
    "RefinementParams",
    "find_containing_leaf",
    "rebuild_tree",
    "refine_incremental",
]
