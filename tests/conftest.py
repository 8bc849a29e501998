"""
Pytest configuration file for lazywindow tests.

Puts the project root on the Python path so the tests run from a plain
checkout, and provides sources that record how they were used.
"""

import sys
from pathlib import Path

# Add the parent directory to the Python path
parent_dir = Path(__file__).parent.parent
if str(parent_dir) not in sys.path:
    sys.path.insert(0, str(parent_dir))

import pytest

from lazywindow.sequences import IteratorSource


class CountingSource(IteratorSource):
    """IteratorSource that counts has_more() and take_next() calls"""

    def __init__(self, iterable):
        super().__init__(iterable)
        self.taken = []
        self.has_more_calls = 0

    def has_more(self):
        self.has_more_calls += 1
        return super().has_more()

    def take_next(self):
        item = super().take_next()
        self.taken.append(item)
        return item


@pytest.fixture
def counting_source():
    """Factory fixture building a CountingSource over any iterable"""
    return CountingSource


@pytest.fixture
def infinite_source():
    """A CountingSource over 0, 1, 2, ... that never ends"""
    def _numbers():
        n = 0
        while True:
            yield n
            n += 1
    return CountingSource(_numbers())
