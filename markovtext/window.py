#!/usr/bin/env python3
"""
Sliding Window
==============
Fixed-capacity circular buffer holding the most recently scanned tokens.

Writes go to ``index % capacity`` and overwrite whatever was there, so the
buffer always holds the last ``capacity`` values. ``read_offset`` reads every
slot once starting from an arbitrary logical position, which gives the
chronological order when called with the current write cursor.

Usage:
    window = SlidingWindow(3)
    for i, word in enumerate(['the', 'big', 'dog', 'was']):
        window[i] = word
    window.read_offset(4)   # ['big', 'dog', 'was']
"""

from typing import Sequence

from .errors import EmptySourceCollection, InvalidBufferSize


# Value of slots that have not been written yet
PLACEHOLDER = ""


class SlidingWindow:
    """Circular store of the last ``capacity`` values written."""

    def __init__(self, capacity: int):
        if capacity < 1:
            raise InvalidBufferSize(capacity)
        self._data = [PLACEHOLDER] * capacity

    @classmethod
    def from_values(cls, values: Sequence) -> 'SlidingWindow':
        """Create a window whose slots are ``values`` (capacity = len(values))."""
        if not values:
            raise EmptySourceCollection()
        window = cls(len(values))
        window._data = list(values)
        return window

    @property
    def capacity(self) -> int:
        return len(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def index(self, index: int) -> int:
        """Resolve a logical index into a slot in ``[0, capacity)``."""
        size = len(self._data)
        while index < 0:
            index += size
        return index % size

    def write(self, index: int, value):
        self._data[self.index(index)] = value

    def read(self, index: int):
        return self._data[self.index(index)]

    __setitem__ = write
    __getitem__ = read

    def read_offset(self, offset: int) -> list:
        """
        Read all slots starting at ``offset``, wrapping once.

        Args:
            offset: Logical start position (the write cursor for chronological order)

        Returns:
            List of ``capacity`` values, oldest first
        """
        size = len(self._data)
        start = self.index(offset)
        return [self._data[(start + i) % size] for i in range(size)]

    def __repr__(self) -> str:
        return f"SlidingWindow({self._data!r})"
