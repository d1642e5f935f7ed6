"""A list with a linear search helper."""

from __future__ import annotations

from typing import Optional, TypeVar

T = TypeVar("T")


class GArray(list):
    """A list of comparable elements that can be searched for a value."""

    def find(self, elem: T) -> Optional[int]:
        """Index of the first element equal to ``elem``, or None if absent."""
        for pos, value in enumerate(self):
            if elem == value:
                return pos
        return None