"""A list of strings kept in ascending order on every insertion.

``OrderedStringList`` stores its values in a fixed-size slot buffer that is
doubled when full and never shrunk. Lookups and removals are linear scans;
insertion shifts the tail right to open a gap. Values equal to existing ones
are placed after the existing run of equals.

The list is not thread-safe and must not be mutated while an iteration over
it is in progress.
"""
from __future__ import annotations

from typing import Iterable, Iterator, List, Optional

from . import observability
from .config import DEFAULT_CAPACITY, RESIZE_FACTOR, validate_capacity
from .errors import IndexOutOfBounds

logger = observability.logger


class OrderedStringIterator(Iterator[str]):
    """Forward iterator over the live slots of an ``OrderedStringList``.

    The number of elements is fixed when the iterator is created and the
    cursor never reads past it.
    """

    def __init__(self, slots: List[Optional[str]], count: int) -> None:
        self._slots = slots
        self._count = count
        self._position = 0

    def __iter__(self) -> OrderedStringIterator:
        return self

    def __next__(self) -> str:
        if self._position >= self._count:
            raise StopIteration
        value = self._slots[self._position]
        self._position += 1
        return value  # type: ignore[return-value]


class OrderedStringList:
    """Hold strings in ascending order in a growable slot buffer."""

    def __init__(
        self,
        iterable: Iterable[str] | None = None,
        capacity: int = DEFAULT_CAPACITY,
    ) -> None:
        capacity = validate_capacity(capacity)
        self._slots: List[Optional[str]] = [None] * capacity
        self._count = 0
        if iterable is not None:
            for value in iterable:
                self.insert(value)

    @classmethod
    def with_capacity(cls, capacity: int) -> OrderedStringList:
        """Create an empty list with room for ``capacity`` values."""
        return cls(capacity=capacity)

    @property
    def capacity(self) -> int:
        return len(self._slots)

    # -- mutation ---------------------------------------------------------

    def insert(self, value: str) -> None:
        """Insert ``value`` before the first element strictly greater than it."""
        if not isinstance(value, str):
            raise TypeError(f"expected str, got {type(value).__name__}")

        index = self._count
        for i in range(self._count):
            if value < self._slots[i]:  # type: ignore[operator]
                index = i
                break

        if self._count == len(self._slots):
            self._resize()

        for i in range(self._count, index, -1):
            self._slots[i] = self._slots[i - 1]
        self._slots[index] = value
        self._count += 1

    add = insert

    def remove_value(self, value: str) -> bool:
        """Remove the first occurrence of ``value``; return whether one was found."""
        index = self.index_of(value)
        if index is None:
            return False
        self._delete(index)
        return True

    def remove_at(self, index: int) -> str:
        """Remove and return the element at ``index``."""
        self._check_index(index)
        value = self._slots[index]
        self._delete(index)
        return value  # type: ignore[return-value]

    def clear(self) -> None:
        for i in range(len(self._slots)):
            self._slots[i] = None
        logger.debug(
            "ordered list cleared",
            extra={"removed": self._count, "capacity": len(self._slots)},
        )
        self._count = 0

    # -- queries ----------------------------------------------------------

    def get(self, index: int) -> str:
        """Return the element at ``index``; negative indices are out of bounds."""
        self._check_index(index)
        return self._slots[index]  # type: ignore[return-value]

    def contains(self, value: str) -> bool:
        return self.index_of(value) is not None

    def index_of(self, value: str) -> Optional[int]:
        """Return the index of the first element equal to ``value``, or ``None``."""
        for i in range(self._count):
            if self._slots[i] == value:
                return i
        return None

    def is_empty(self) -> bool:
        return self._count == 0

    def size(self) -> int:
        return self._count

    def iterate(self) -> OrderedStringIterator:
        return OrderedStringIterator(self._slots, self._count)

    # -- internals --------------------------------------------------------

    def _check_index(self, index: int) -> None:
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError(f"index must be an int, got {type(index).__name__}")
        if index < 0 or index >= self._count:
            observability.inc_index_error()
            raise IndexOutOfBounds(index, self._count)

    def _delete(self, index: int) -> None:
        for i in range(index + 1, self._count):
            self._slots[i - 1] = self._slots[i]
        self._count -= 1
        self._slots[self._count] = None

    def _resize(self) -> None:
        old_capacity = len(self._slots)
        new_slots: List[Optional[str]] = [None] * (old_capacity * RESIZE_FACTOR)
        new_slots[: self._count] = self._slots[: self._count]
        self._slots = new_slots
        observability.inc_resize()
        logger.debug(
            "ordered list resized",
            extra={"old_capacity": old_capacity, "new_capacity": len(new_slots)},
        )

    # -- protocol ---------------------------------------------------------

    def __len__(self) -> int:
        return self._count

    def __getitem__(self, index: int) -> str:
        return self.get(index)

    def __contains__(self, value: object) -> bool:
        return isinstance(value, str) and self.contains(value)

    def __iter__(self) -> Iterator[str]:
        return self.iterate()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrderedStringList):
            return NotImplemented
        return list(self) == list(other)

    def __repr__(self) -> str:
        return f"OrderedStringList({list(self)!r})"
