"""Exceptions raised by the ordered string list."""


class OrderedListError(Exception):
    """Base class for errors raised by this package."""


class InvalidArgument(OrderedListError, ValueError):
    """Raised when a list is constructed with an unusable capacity."""


class IndexOutOfBounds(OrderedListError, IndexError):
    """Raised when an index falls outside ``[0, size)``."""

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"index {index} out of range for list of size {size}")
