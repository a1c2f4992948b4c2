# File location: nested-numerics/src/nestnum/core/prng.py

"""
Seeded pseudo-random draws over Numeric Values.

A ``RandomGenerator`` is a register holding a JAX PRNG key. Every draw
splits the key and pulls one bounded integer from the fresh subkey, so two
generators reseeded with the same seed and asked for the same sequence of
draws produce identical results. All other draws are built on that single
primitive.

The process-wide default generator is seeded from ``NESTNUM_SEED`` when it
is set, otherwise from the clock. Access to a generator's key is guarded by
a lock; the reproducibility contract still only holds for one sequential
caller, since interleaved callers see each other's draws.
"""

import contextlib
import contextvars
import logging
import os
import threading
import time
from typing import Any, Iterator, List, Optional, Sequence

import jax.numpy as jnp
import jax.random as jr

from ..config import get_config
from .broadcast import map1, map2
from .errors import RangeError
from .values import to_float

__all__ = [
    "MAX_BOUND",
    "RandomGenerator",
    "default_generator",
    "generator_scope",
    "reseed",
    "draw_bounded",
    "draw_range",
    "draw_unit",
    "random_like",
]

LOGGER = logging.getLogger(__name__)

MAX_BOUND = 2 ** 30 - 1
_SEED_MODULUS = 2 ** 31


def _normalize_seed(seed: Any) -> int:
    if isinstance(seed, bool) or not isinstance(seed, int):
        try:
            as_float = to_float(seed)
        except TypeError:
            raise TypeError(f"Seed must be an integer, got {type(seed).__name__}") from None
        if not as_float.is_integer():
            raise TypeError(f"Seed must be an integer, got {seed!r}")
        seed = int(as_float)
    return seed % _SEED_MODULUS


def _entropy_seed() -> int:
    return (time.time_ns() ^ (os.getpid() << 16)) % _SEED_MODULUS


def _check_maximum(maximum: Any) -> int:
    value = to_float(maximum)
    if not value.is_integer():
        raise RangeError(f"Bound must be an integer, got {maximum!r}", value=maximum)
    if value < 1:
        raise RangeError(f"Bound must be >= 1, got {maximum!r}", value=maximum)
    if value > MAX_BOUND:
        raise RangeError(
            f"Bound {maximum!r} exceeds generator ceiling {MAX_BOUND}", value=maximum
        )
    return int(value)


class RandomGenerator:
    """Generator register producing reproducible bounded draws.

    Example:
        rng = RandomGenerator(12345)
        a = rng.draw_bounded(1000)
        rng.reseed(12345)
        assert rng.draw_bounded(1000) == a
    """

    def __init__(self, seed: Optional[int] = None):
        """Initialize the register.

        Args:
            seed: Initial seed; ``None`` seeds from the clock
        """
        self._lock = threading.Lock()
        self._seed = 0
        self._key = None
        self.reseed(_entropy_seed() if seed is None else seed)

    @property
    def seed(self) -> int:
        """Seed of the most recent (re)initialization."""
        return self._seed

    def reseed(self, seed: int) -> None:
        """Deterministically reinitialize the register from ``seed``."""
        seed = _normalize_seed(seed)
        with self._lock:
            self._seed = seed
            self._key = jr.PRNGKey(seed)
        LOGGER.debug("Generator %#x reseeded with %d", id(self), seed)

    def get_state(self) -> tuple:
        """Snapshot of the register, usable with ``set_state``."""
        with self._lock:
            return (self._seed, tuple(int(w) for w in self._key))

    def set_state(self, state: Sequence) -> None:
        """Restore a snapshot taken with ``get_state``."""
        seed, words = state
        with self._lock:
            self._seed = int(seed)
            self._key = jnp.asarray(words, dtype=jnp.uint32)

    def _next_key(self):
        with self._lock:
            self._key, subkey = jr.split(self._key)
        return subkey

    def draw_bounded(self, maximum: int) -> int:
        """Draw one integer uniformly from ``[1, maximum]``.

        Raises:
            RangeError: ``maximum`` is below 1, non-integral or above ``MAX_BOUND``
        """
        maximum = _check_maximum(maximum)
        subkey = self._next_key()
        return int(jr.randint(subkey, (), 1, maximum + 1))

    def draw_range(self, lo: int, hi: int) -> int:
        """Draw one integer uniformly from ``[lo, hi]``.

        Raises:
            RangeError: ``lo >= hi`` or the span exceeds ``MAX_BOUND``
        """
        lo_value, hi_value = to_float(lo), to_float(hi)
        if not (lo_value.is_integer() and hi_value.is_integer()):
            raise RangeError(f"Range bounds must be integers, got [{lo!r}, {hi!r}]", value=lo)
        if lo_value >= hi_value:
            raise RangeError(f"Empty range: lo={lo!r} must be < hi={hi!r}", value=lo)
        lo_int, hi_int = int(lo_value), int(hi_value)
        return lo_int - 1 + self.draw_bounded(hi_int - lo_int + 1)

    def draw_unit(self) -> float:
        """Draw a real in ``[0.0, 1.0]``.

        Two bounded draws share the same ceiling and the smaller is divided
        by the larger. A draw landing on the minimum value 1 yields 0.0.
        """
        a = self.draw_bounded(MAX_BOUND)
        b = self.draw_bounded(MAX_BOUND)
        if a == 1 or b == 1:
            return 0.0
        if a > b:
            a, b = b, a
        return a / b

    def fork(self, num: int) -> List['RandomGenerator']:
        """Create independent child generators.

        Children are seeded from draws of this generator, so a fork taken
        after the same reseed is itself reproducible.

        Args:
            num: Number of children

        Returns:
            List of new RandomGenerator objects
        """
        children = [RandomGenerator(self.draw_bounded(MAX_BOUND)) for _ in range(num)]
        LOGGER.debug("Generator %#x forked %d children", id(self), num)
        return children


def _initial_seed() -> int:
    seed = get_config().seed
    return _entropy_seed() if seed is None else seed


_default_generator = RandomGenerator(_initial_seed())
_scoped_generator: contextvars.ContextVar = contextvars.ContextVar(
    "nestnum_scoped_generator", default=None
)


def default_generator() -> RandomGenerator:
    """Generator used when no ``rng`` is passed: the scoped one, else the process-wide one."""
    scoped = _scoped_generator.get()
    return _default_generator if scoped is None else scoped


@contextlib.contextmanager
def generator_scope(rng: RandomGenerator) -> Iterator[RandomGenerator]:
    """Make ``rng`` the default generator within a ``with`` block."""
    token = _scoped_generator.set(rng)
    try:
        yield rng
    finally:
        _scoped_generator.reset(token)


def _resolve(rng: Optional[RandomGenerator]) -> RandomGenerator:
    return default_generator() if rng is None else rng


def reseed(seed: int, rng: Optional[RandomGenerator] = None) -> None:
    """Reseed the default (or given) generator."""
    _resolve(rng).reseed(seed)


def draw_bounded(maximum: Any, rng: Optional[RandomGenerator] = None) -> Any:
    """Draw integers in ``[1, maximum]``, one per scalar of ``maximum``.

    Args:
        maximum: Upper bound, or a Numeric Value of upper bounds
        rng: Generator to draw from (default generator if omitted)

    Returns:
        Integer, or a value shaped like ``maximum``
    """
    return map1(_resolve(rng).draw_bounded, maximum)


def draw_range(lo: Any, hi: Any, rng: Optional[RandomGenerator] = None) -> Any:
    """Draw integers in ``[lo, hi]``; ``lo`` and ``hi`` broadcast together."""
    return map2(_resolve(rng).draw_range, lo, hi)


def draw_unit(template: Any = None, rng: Optional[RandomGenerator] = None) -> Any:
    """Draw reals in ``[0, 1]``.

    Args:
        template: Optional Numeric Value; one draw is made per scalar
        rng: Generator to draw from (default generator if omitted)

    Returns:
        Float, or a value shaped like ``template``
    """
    generator = _resolve(rng)
    if template is None:
        return generator.draw_unit()
    return map1(lambda _: generator.draw_unit(), template)


def random_like(template: Any,
                distribution: str = 'unit',
                rng: Optional[RandomGenerator] = None,
                **kwargs) -> Any:
    """Generate random values shaped like ``template``.

    Args:
        template: Numeric Value providing the shape
        distribution: Distribution name ('unit', 'bounded', 'range')
        rng: Generator to draw from
        **kwargs: Distribution-specific parameters (``maximum``; ``lo``/``hi``)

    Returns:
        Value with the shape of ``template``
    """
    generator = _resolve(rng)

    if distribution == 'unit':
        return map1(lambda _: generator.draw_unit(), template)

    elif distribution == 'bounded':
        maximum = kwargs.get('maximum')
        if maximum is None:
            raise ValueError("bounded distribution requires 'maximum' parameter")
        return map1(lambda _: generator.draw_bounded(maximum), template)

    elif distribution == 'range':
        if 'lo' not in kwargs or 'hi' not in kwargs:
            raise ValueError("range distribution requires 'lo' and 'hi' parameters")
        lo, hi = kwargs['lo'], kwargs['hi']
        return map1(lambda _: generator.draw_range(lo, hi), template)

    else:
        raise ValueError(f"Unknown distribution: {distribution}")
