# File location: nested-numerics/src/nestnum/utils/tree_utils.py

"""
Path-aware helpers for Numeric Values.

Paths are tuples of container indices from the outermost level inward,
the same form carried by ``NumericError.path``.
"""

import math
from typing import Any, Dict, List, Sequence, Tuple

from jax import tree_util

from ..core.broadcast import iter_leaves, map1
from ..core.values import (
    as_value, depth, guard_recursion, is_container, is_ragged, shape
)

__all__ = [
    "flatten_with_path",
    "unflatten_like",
    "value_at_path",
    "update_at_path",
    "value_diff",
    "value_allclose",
    "value_statistics",
]


@guard_recursion
def flatten_with_path(v: Any) -> List[Tuple[Tuple[int, ...], Any]]:
    """Flatten a value while preserving the path to each scalar.

    Args:
        v: Numeric Value to flatten

    Returns:
        [(path, scalar), ...] in pre-order
    """
    return list(iter_leaves(as_value(v), ()))


def unflatten_like(template: Any, scalars: Sequence[Any]) -> Any:
    """Rebuild ``template``'s shape from a flat sequence of scalars.

    Args:
        template: Value providing the shape
        scalars: Replacement scalars in pre-order

    Returns:
        New value shaped like ``template``
    """
    treedef = tree_util.tree_structure(as_value(template))
    if treedef.num_leaves != len(scalars):
        raise ValueError(
            f"Template holds {treedef.num_leaves} scalars, got {len(scalars)}"
        )
    return tree_util.tree_unflatten(treedef, list(scalars))


def value_at_path(v: Any, path: Tuple[int, ...]) -> Any:
    """Return the element of ``v`` found at ``path``."""
    node = as_value(v)
    for i, key in enumerate(path):
        if not is_container(node):
            raise TypeError(f"Cannot index into scalar at path {list(path[:i])}")
        node = node[key]
    return node


@guard_recursion
def update_at_path(v: Any, path: Tuple[int, ...], new_value: Any) -> Any:
    """Return a copy of ``v`` with the element at ``path`` replaced.

    Args:
        v: Value to update
        path: Path to update (tuple of indices)
        new_value: New value to set

    Returns:
        Updated value; ``v`` itself is left untouched
    """
    def update_recursive(current, remaining_path):
        if not remaining_path:
            return as_value(new_value)

        key = remaining_path[0]
        if not is_container(current):
            raise TypeError(f"Cannot index into type {type(current).__name__}")

        updated = list(current)
        updated[key] = update_recursive(current[key], remaining_path[1:])
        return updated

    return update_recursive(as_value(v), tuple(path))


@guard_recursion
def value_diff(a: Any, b: Any, tolerance: float = 1e-8) -> Dict[str, Any]:
    """Compare two values and return differences.

    Args:
        a: First value
        b: Second value
        tolerance: Absolute tolerance for scalar comparison

    Returns:
        Dictionary containing difference information
    """
    if shape(a) != shape(b):
        return {'structure_differs': True, 'shape1': shape(a), 'shape2': shape(b)}

    differences = []
    max_diff = 0.0

    for (path, x), (_, y) in zip(flatten_with_path(a), flatten_with_path(b)):
        x, y = float(x), float(y)
        if math.isnan(x) and math.isnan(y):
            continue
        diff = abs(x - y)
        if diff > tolerance or math.isnan(diff):
            differences.append({'path': path, 'value1': x, 'value2': y, 'diff': diff})
        if not math.isnan(diff):
            max_diff = max(max_diff, diff)

    return {
        'structure_differs': False,
        'num_differences': len(differences),
        'max_difference': max_diff,
        'differences': differences,
        'values_equal': len(differences) == 0,
    }


def value_allclose(a: Any, b: Any, tolerance: float = 1e-8) -> bool:
    """True if ``a`` and ``b`` share a shape and agree within ``tolerance``."""
    report = value_diff(a, b, tolerance)
    return not report['structure_differs'] and report['values_equal']


@guard_recursion
def value_statistics(v: Any) -> Dict[str, Any]:
    """Compute statistics about a Numeric Value.

    Args:
        v: Value to analyze

    Returns:
        Dictionary of counts, depth and scalar range
    """
    pairs = flatten_with_path(v)
    if not pairs:
        return {'empty': True, 'max_depth': depth(as_value(v))}

    scalars = [float(s) for _, s in pairs]
    integral = map1(lambda s: float(s).is_integer(), v)
    num_integral = len([flag for flag in tree_util.tree_leaves(integral) if flag])

    return {
        'empty': False,
        'num_scalars': len(scalars),
        'num_integral': num_integral,
        'max_depth': depth(as_value(v)),
        'max_path_length': max(len(path) for path, _ in pairs),
        'ragged': is_ragged(v),
        'min': min(scalars),
        'max': max(scalars),
        'total': math.fsum(scalars),
    }
