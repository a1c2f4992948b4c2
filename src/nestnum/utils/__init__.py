# File location: nested-numerics/src/nestnum/utils/__init__.py

"""
Utility functions for path-aware inspection and comparison of values.
"""

from .tree_utils import *

__all__ = [
    # tree_utils.py
    "flatten_with_path",
    "unflatten_like",
    "value_at_path",
    "update_at_path",
    "value_diff",
    "value_allclose",
    "value_statistics",
]
