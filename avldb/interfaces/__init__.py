"""
Abstract base classes and protocols for the record index.
"""

from avldb.interfaces.range_iterable import RangeIterable
from avldb.interfaces.sorted_container import SortedContainer

__all__ = ["RangeIterable", "SortedContainer"]
