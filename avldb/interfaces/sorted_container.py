"""
SortedContainer abstract base class for key-ordered record indexes.
"""

from abc import abstractmethod

from avldb.interfaces.range_iterable import RangeIterable
from avldb.models.record import Record


class SortedContainer(RangeIterable):
    """
    Abstract base class for key-ordered record indexes.

    Provides O(log N) operations for insert, search, and delete.
    Inherits ordered iteration from RangeIterable.

    Implementations:
    - AVLTree: Height-balanced, rebalanced on every insert and delete
    """

    @abstractmethod
    def insert(self, record: Record) -> bool:
        """
        Insert a record ordered by its key.

        Args:
            record: The record to insert.

        Returns:
            True if the record was linked in, False if its key already exists.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def search(self, key: str, value: int | None = None) -> Record | None:
        """
        Find the record stored under a key.

        Args:
            key: The key to look up.
            value: Accepted for symmetry with delete; not used for matching.

        Returns:
            The Record if found, None otherwise.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def delete(self, key: str, value: int) -> bool:
        """
        Remove the record stored under a key if its value also matches.

        Args:
            key: The key to remove.
            value: The value the stored record must carry.

        Returns:
            True if a record was removed, False otherwise.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def has(self, key: str) -> bool:
        """
        Check if a key exists.

        Args:
            key: The key to check.

        Returns:
            True if the key exists, False otherwise.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """
        Return the number of records.

        Time complexity: O(1)
        """
        pass

    @abstractmethod
    def height(self) -> int:
        """
        Return the height of the index, 0 when empty.

        Time complexity: O(1)
        """
        pass
