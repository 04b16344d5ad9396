"""
RangeIterable protocol for indexes that support ordered iteration.
"""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Iterator

from avldb.models.record import Record


class RangeIterable(ABC):
    """
    Protocol for data structures that iterate records in key order.

    Implementations must support:
    - Full iteration via __iter__
    - Key-bounded iteration via iterator(start, end)
    - Async iteration via __aiter__
    - Async key-bounded iteration via async_iterator(start, end)
    """

    @abstractmethod
    def __iter__(self) -> Iterator[Record]:
        """Return an iterator over all records in ascending key order."""
        pass

    @abstractmethod
    def iterator(
        self, start: str | None = None, end: str | None = None
    ) -> Iterator[Record]:
        """
        Return an iterator over records in the specified key range.

        Args:
            start: Start key (inclusive). If None, starts from the beginning.
            end: End key (exclusive). If None, iterates to the end.

        Returns:
            Iterator yielding records in ascending key order.
        """
        pass

    @abstractmethod
    def __aiter__(self) -> AsyncIterator[Record]:
        """Return an async iterator over all records in ascending key order."""
        pass

    @abstractmethod
    def async_iterator(
        self, start: str | None = None, end: str | None = None
    ) -> AsyncIterator[Record]:
        """
        Return an async iterator over records in the specified key range.

        Args:
            start: Start key (inclusive). If None, starts from the beginning.
            end: End key (exclusive). If None, iterates to the end.

        Returns:
            AsyncIterator yielding records in ascending key order.
        """
        pass
