# tests/conftest.py

import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src"))

from nestnum import config


@pytest.fixture
def max_depth():
    """Set an explicit nesting limit for one test and restore it afterwards."""
    previous = config.get_config().max_depth

    def _set(limit):
        return config.set_max_depth(limit)

    yield _set
    config.set_max_depth(previous)
