# File location: nested-numerics/src/nestnum/__init__.py

"""
nested-numerics: shape-polymorphic numerics over ragged nested values.

Elementwise math, bitwise operations, reductions and seeded random draws
that apply uniformly to a single number or to arbitrarily nested
lists/tuples of numbers.
"""

__version__ = "0.1.0"

from . import config
from . import core
from . import utils
from .core import *

__all__ = [
    "__version__",
    "config",
    "core",
    "utils",
] + list(core.__all__)
