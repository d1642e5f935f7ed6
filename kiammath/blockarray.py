"""A growable array that stores its elements in fixed-size blocks."""

from __future__ import annotations

from itertools import chain, islice
from typing import Any, Generic, Iterable, Iterator, List, TypeVar

T = TypeVar("T")

DEFAULT_BLOCK_SIZE = 4096


class BlockArray(Generic[T]):
    """Array whose storage grows by whole blocks, so elements never move.

    Cells that have been allocated but never written hold ``fill``.
    """

    __hash__ = None  # mutable container

    def __init__(self, block_size: int = DEFAULT_BLOCK_SIZE, fill: Any = None) -> None:
        if block_size <= 0:
            raise ValueError(f"block size must be positive, got {block_size}")
        self._block_size = block_size
        self._fill = fill
        self._blocks: List[List[Any]] = []
        self._count = 0

    @property
    def block_size(self) -> int:
        return self._block_size

    def _raw_get(self, pos: int) -> T:
        block, offset = divmod(pos, self._block_size)
        return self._blocks[block][offset]

    def _raw_set(self, pos: int, value: T) -> None:
        block, offset = divmod(pos, self._block_size)
        self._blocks[block][offset] = value

    def _checked(self, pos: int) -> int:
        if pos < 0:
            pos += self._count
        if not 0 <= pos < self._count:
            raise IndexError(f"position {pos} out of range for length {self._count}")
        return pos

    def _expand(self, needed: int) -> None:
        blocks_needed = -(-needed // self._block_size)
        if blocks_needed > len(self._blocks):
            self.resize(needed)

    def __getitem__(self, pos: int) -> T:
        return self._raw_get(self._checked(pos))

    def __setitem__(self, pos: int, value: T) -> None:
        self._raw_set(self._checked(pos), value)

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[T]:
        return islice(chain.from_iterable(self._blocks), self._count)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BlockArray):
            return NotImplemented
        return len(self) == len(other) and all(a == b for a, b in zip(self, other))

    def __repr__(self) -> str:
        return f"BlockArray({list(self)!r}, block_size={self._block_size})"

    def block_data(self, block: int) -> List[T]:
        """The storage list of one block; changes to it show in the array."""
        return self._blocks[block]

    def block_index(self, pos: int) -> int:
        return pos // self._block_size

    def first_in_block(self, block_index: int) -> int:
        return block_index * self._block_size

    def capacity(self) -> int:
        """Number of cells currently allocated."""
        return len(self._blocks) * self._block_size

    def add(self, elem: T) -> None:
        self._expand(self._count + 1)
        self._raw_set(self._count, elem)
        self._count += 1

    def extend(self, elems: Iterable[T]) -> None:
        items = list(elems)
        self._expand(self._count + len(items))
        for offset, value in enumerate(items):
            self._raw_set(self._count + offset, value)
        self._count += len(items)

    def insert(self, pos: int, elems: Iterable[T]) -> None:
        """Insert ``elems`` before ``pos``; a ``pos`` past the end extends the array."""
        if pos < 0:
            raise IndexError(f"insert position {pos} is negative")
        items = list(elems)
        old_count = self._count
        new_len = pos + len(items) if pos > old_count else old_count + len(items)
        self._expand(new_len)
        tail = [self._raw_get(i) for i in range(pos, old_count)]
        self._count = new_len
        for offset, value in enumerate(items + tail):
            self._raw_set(pos + offset, value)

    def put(self, pos: int, elem: T) -> None:
        """Store ``elem`` at ``pos``, lengthening the array if needed."""
        if pos < 0:
            raise IndexError(f"position {pos} is negative")
        self._expand(pos + 1)
        if self._count <= pos:
            self._count = pos + 1
        self._raw_set(pos, elem)

    def exclude(self, pos: int, length: int = 1) -> None:
        """Delete ``length`` elements starting at ``pos``, keeping order."""
        if length <= 0:
            raise ValueError(f"length must be positive, got {length}")
        if not 0 <= pos < self._count:
            raise IndexError(f"position {pos} out of range for length {self._count}")
        if pos + length < self._count:
            moved = [self._raw_get(i) for i in range(pos + length, self._count)]
            for offset, value in enumerate(moved):
                self._raw_set(pos + offset, value)
            self._count -= length
        else:
            self._count = pos

    def remove(self, pos: int) -> None:
        """Delete the element at ``pos`` by moving the last element into it."""
        pos = self._checked(pos)
        self._raw_set(pos, self._raw_get(self._count - 1))
        self._count -= 1

    def truncate(self, new_count: int = 0) -> None:
        if not 0 <= new_count <= self._count:
            raise ValueError(f"cannot truncate length {self._count} to {new_count}")
        self._count = new_count

    def resize(self, new_count: int = 0) -> None:
        """Set the capacity to hold ``new_count`` elements in whole blocks."""
        if new_count < 0:
            raise ValueError(f"new size {new_count} is negative")
        if new_count == 0:
            self._blocks = []
            self._count = 0
            return
        required = -(-new_count // self._block_size)
        if required == len(self._blocks):
            return
        if required < len(self._blocks):
            del self._blocks[required:]
        else:
            self._blocks.extend(
                [self._fill] * self._block_size
                for _ in range(required - len(self._blocks))
            )
        self._count = min(self._count, new_count)

    def allocate(self, new_len: int) -> None:
        """Set the length to ``new_len``, adding blocks if needed."""
        if new_len < 0:
            raise ValueError(f"length {new_len} is negative")
        if new_len > self.capacity():
            self.resize(new_len)
        self._count = new_len

    def zero_allocate(self, new_len: int) -> None:
        """Like :meth:`allocate`, but cells past the old length are reset to the fill value."""
        old_block, old_offset = divmod(self._count, self._block_size)
        self.allocate(new_len)
        if old_block >= len(self._blocks):
            return
        first = self._blocks[old_block]
        first[old_offset:] = [self._fill] * (self._block_size - old_offset)
        for block in self._blocks[old_block + 1:]:
            block[:] = [self._fill] * self._block_size

    def grow(self, new_len: int) -> None:
        """Lengthen the array to ``new_len``; a shorter length is ignored."""
        if new_len < 0:
            raise ValueError(f"length {new_len} is negative")
        if new_len <= self._count:
            return
        self._expand(new_len)
        self._count = new_len

    def copy(self) -> "BlockArray[T]":
        result: BlockArray[T] = BlockArray(self._block_size, self._fill)
        result._blocks = [list(block) for block in self._blocks]
        result._count = self._count
        return result

    def swap(self, other: "BlockArray[T]") -> None:
        """Exchange the whole contents of two arrays."""
        self._blocks, other._blocks = other._blocks, self._blocks
        self._count, other._count = other._count, self._count
        self._block_size, other._block_size = other._block_size, self._block_size
        self._fill, other._fill = other._fill, self._fill