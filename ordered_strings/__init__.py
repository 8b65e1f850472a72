"""Insertion-sorted list of strings."""
from .errors import IndexOutOfBounds, InvalidArgument, OrderedListError
from .observability import configure_logging
from .ordered_list import OrderedStringIterator, OrderedStringList

__all__ = [
    "IndexOutOfBounds",
    "InvalidArgument",
    "OrderedListError",
    "OrderedStringIterator",
    "OrderedStringList",
    "configure_logging",
]
