# File location: nested-numerics/src/nestnum/config.py

"""
Runtime configuration read from the environment.

Recognized variables:
- ``NESTNUM_SEED``: initial seed of the process-wide random generator
- ``NESTNUM_MAX_DEPTH``: explicit nesting limit for the broadcast engine
  (``0`` leaves the limit to the interpreter's recursion budget)
"""

import logging
import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

__all__ = [
    "SEED_ENV",
    "MAX_DEPTH_ENV",
    "NumericConfig",
    "load_config",
    "get_config",
    "set_max_depth",
]

LOGGER = logging.getLogger(__name__)

SEED_ENV = "NESTNUM_SEED"
MAX_DEPTH_ENV = "NESTNUM_MAX_DEPTH"


@dataclass(frozen=True)
class NumericConfig:
    """Settings consulted by the engine and the random subsystem."""

    seed: Optional[int] = None
    max_depth: int = 0


def _parse_int(env: Mapping[str, str], name: str, minimum: Optional[int] = None) -> Optional[int]:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return None
    try:
        value = int(raw.strip())
    except ValueError:
        LOGGER.warning("Ignoring %s=%r: not an integer", name, raw)
        return None
    if minimum is not None and value < minimum:
        LOGGER.warning("Ignoring %s=%r: must be >= %d", name, raw, minimum)
        return None
    return value


def load_config(env: Optional[Mapping[str, str]] = None) -> NumericConfig:
    """Build a configuration from environment variables.

    Args:
        env: Mapping to read from (defaults to ``os.environ``)

    Returns:
        Parsed configuration; invalid entries fall back to defaults
    """
    if env is None:
        env = os.environ

    max_depth = _parse_int(env, MAX_DEPTH_ENV, minimum=0)
    return NumericConfig(
        seed=_parse_int(env, SEED_ENV),
        max_depth=0 if max_depth is None else max_depth,
    )


_config = load_config()


def get_config() -> NumericConfig:
    """Return the active configuration."""
    return _config


def set_max_depth(max_depth: int) -> NumericConfig:
    """Change the engine's nesting limit (0 disables the explicit limit)."""
    global _config
    if max_depth < 0:
        raise ValueError(f"max_depth must be >= 0, got {max_depth}")
    _config = replace(_config, max_depth=max_depth)
    return _config
