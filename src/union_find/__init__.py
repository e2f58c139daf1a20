"""Disjoint-set (union-find) data structures.

This package provides:
- Node: linked disjoint-set elements with make_set, find and union
- DisjointSetForest: handle-based arena with optional path compression
  and union by size or rank
"""

from union_find.core.config import ForestConfig, UnionStrategy, load_config
from union_find.core.forest import DisjointSetForest
from union_find.core.node import Node, find, make_set, union
from union_find.error.exceptions import (
    CyclicStructureError,
    UnionFindError,
    UnknownHandleError,
)

__version__ = "0.1.0"

__all__ = [
    "Node",
    "make_set",
    "find",
    "union",
    "DisjointSetForest",
    "ForestConfig",
    "UnionStrategy",
    "load_config",
    "UnionFindError",
    "CyclicStructureError",
    "UnknownHandleError",
]
