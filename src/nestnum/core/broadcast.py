# File location: nested-numerics/src/nestnum/core/broadcast.py

"""
Broadcast engine: shape-polymorphic map and fold over Numeric Values.

Every exported numeric function is a scalar kernel plus one call into this
module. The engine walks containers depth-first, applies the kernel at the
scalars and rebuilds the result as new lists, so inputs are never mutated.

Broadcasting rules for ``map2``:
- scalar with scalar: apply the kernel
- scalar with container (either side): the scalar is paired with every
  element of the container, at any depth
- container with container: lengths must match at the level being
  compared, otherwise ``ShapeMismatchError`` is raised for that level
"""

import logging
from typing import Any, Callable, List, Optional, Tuple

from .errors import NumericError, ShapeMismatchError
from .values import (
    as_value, check_depth, guard_recursion, is_container, iter_leaves
)

__all__ = [
    "map1",
    "map2",
    "reduce",
    "leaves",
    "iter_leaves",
]

LOGGER = logging.getLogger(__name__)

Path = Tuple[int, ...]


def _apply(kernel: Callable, path: Path, *scalars: Any) -> Any:
    try:
        return kernel(*scalars)
    except NumericError as exc:
        if exc.path is None:
            exc.path = path
        raise


@guard_recursion
def map1(kernel: Callable[[Any], Any], v: Any) -> Any:
    """Apply a unary scalar kernel to every scalar in ``v``.

    Args:
        kernel: Scalar-to-scalar function
        v: Numeric Value

    Returns:
        Value with the same shape as ``v`` holding the kernel results
    """
    def _map(node, path):
        if is_container(node):
            check_depth(path)
            return [_map(e, path + (i,)) for i, e in enumerate(node)]
        return _apply(kernel, path, node)

    return _map(as_value(v), ())


@guard_recursion
def map2(kernel: Callable[[Any, Any], Any], a: Any, b: Any) -> Any:
    """Apply a binary scalar kernel with broadcasting.

    Args:
        kernel: Scalar-pair-to-scalar function
        a: Left Numeric Value
        b: Right Numeric Value

    Returns:
        Broadcast result of applying ``kernel`` position by position

    Raises:
        ShapeMismatchError: two containers at the same level differ in length
    """
    def _map(x, y, path):
        x_is_container = is_container(x)
        y_is_container = is_container(y)

        if not x_is_container and not y_is_container:
            return _apply(kernel, path, x, y)

        check_depth(path)
        if x_is_container and y_is_container:
            if len(x) != len(y):
                LOGGER.debug("Shape mismatch at %s: %d vs %d", list(path), len(x), len(y))
                raise ShapeMismatchError(len(x), len(y), path=path)
            return [_map(xe, ye, path + (i,)) for i, (xe, ye) in enumerate(zip(x, y))]

        if x_is_container:
            return [_map(xe, y, path + (i,)) for i, xe in enumerate(x)]

        return [_map(x, ye, path + (i,)) for i, ye in enumerate(y)]

    return _map(as_value(a), as_value(b), ())


@guard_recursion
def leaves(v: Any) -> List[Any]:
    """All scalars of ``v`` in pre-order, siblings in container order."""
    return [leaf for _, leaf in iter_leaves(as_value(v), ())]


@guard_recursion
def reduce(combine: Callable[[Any, Any], Any],
           identity: Optional[Any],
           v: Any) -> Any:
    """Fold every scalar of ``v`` left to right.

    Args:
        combine: Binary accumulation function ``(acc, scalar) -> acc``
        identity: Initial accumulator; ``None`` seeds with the first scalar
        v: Numeric Value

    Returns:
        Folded result; ``identity`` for a value with no scalars
    """
    result = identity
    seeded = identity is not None
    for path, leaf in iter_leaves(as_value(v), ()):
        if not seeded:
            result = leaf
            seeded = True
            continue
        result = _apply(combine, path, result, leaf)
    return result
