"""
IndexedDatabase - Record store API over a single AVL index.
"""

import logging
from collections.abc import Iterator

from avldb.models.record import Record
from avldb.models.sortedcontainers import AVLTree
from avldb.models.sortedcontainers.avl_tree import Node

logger = logging.getLogger(__name__)


class IndexedDatabase:
    """
    In-memory record store backed by one AVLTree.

    Provides:
    - insert(record): Add a record under its key
    - search(key): Point lookup, None when absent
    - delete_record(key, value): Remove a record when key and value match
    - range_query(start, end): Records whose value lies in [start, end]
    - clear_database(): Release every record
    - get_tree_height(): Height recomputed from scratch
    - get_search_comparisons(key): Node visits made by one search

    The tree is ordered by key only. range_query prunes on the record value,
    so it returns complete results only while key order and value order agree
    for the stored data. Records are never re-sorted by value to mask this.
    """

    def __init__(self, index: AVLTree | None = None) -> None:
        """
        Initialize the database.

        Args:
            index: The backing tree. A fresh AVLTree is created if omitted.
        """
        self._index = index if index is not None else AVLTree()

    @property
    def index(self) -> AVLTree:
        return self._index

    def insert(self, record: Record) -> None:
        """
        Insert a record.

        Args:
            record: The record to store. The database owns it from now on.

        Raises:
            TypeError: If record is not a Record.
        """
        if not isinstance(record, Record):
            raise TypeError(f"record must be a Record, got {type(record).__name__}")

        if not self._index.insert(record):
            logger.warning(f"Duplicate key {record.key!r} ignored")
            return

        logger.debug(f"Inserted {record.key!r} -> {record.value}")

    def search(self, key: str, value: int | None = None) -> Record | None:
        """
        Look up a record by key.

        Args:
            key: The key to look up.
            value: Not used for matching.

        Returns:
            The Record if found, None otherwise.
        """
        return self._index.search(key, value)

    def delete_record(self, key: str, value: int) -> None:
        """
        Delete the record stored under key if its value matches.

        A missing key or a mismatched value leaves the database unchanged.
        """
        if self._index.delete(key, value):
            logger.debug(f"Deleted {key!r} -> {value}")
        else:
            logger.debug(f"Delete of {key!r} -> {value} matched no record")

    def range_query(self, start: int, end: int) -> list[Record]:
        """
        Get all records whose value lies in [start, end].

        Args:
            start: Lowest value (inclusive).
            end: Highest value (inclusive).

        Returns:
            Matching records in ascending key order. Empty when start > end
            or the database is empty.

        Raises:
            TypeError: If a bound is not an int.
        """
        for name, bound in (("start", start), ("end", end)):
            if isinstance(bound, bool) or not isinstance(bound, int):
                raise TypeError(f"{name} must be an int, got {type(bound).__name__}")

        result: list[Record] = []
        self._range_query_helper(self._index.root, start, end, result)
        return result

    def clear_database(self) -> None:
        """Release every node and record, leaving an empty database."""
        released = self._clear_helper(self._index.root)
        self._index.clear()
        logger.debug(f"Cleared database, released {released} records")

    def get_tree_height(self) -> int:
        """Height of the whole tree recomputed by full traversal. O(N)"""
        return self._calculate_height(self._index.root)

    def get_search_comparisons(self, key: str, value: int | None = None) -> int:
        """Run a search for key and return the number of nodes it visited."""
        self.search(key, value)
        return self._index.last_search_comparisons

    def key_range(self, start: str | None, end: str | None) -> list[Record]:
        """
        Get all records with start <= key < end.

        Args:
            start: Start key (inclusive). None means unbounded.
            end: End key (exclusive). None means unbounded.

        Returns:
            List of records in ascending key order.
        """
        return list(self._index.iterator(start, end))

    def __len__(self) -> int:
        return self._index.size()

    def __iter__(self) -> Iterator[Record]:
        return iter(self._index)

    def _range_query_helper(
        self, node: Node | None, start: int, end: int, result: list[Record]
    ) -> None:
        if node is None:
            return

        value = node.record.value
        if value > start:
            self._range_query_helper(node.left, start, end, result)

        if start <= value <= end:
            result.append(node.record)

        if value < end:
            self._range_query_helper(node.right, start, end, result)

    def _clear_helper(self, node: Node | None) -> int:
        """Post-order unlink of a subtree. Returns the number of nodes released."""
        if node is None:
            return 0

        released = self._clear_helper(node.left) + self._clear_helper(node.right)
        node.left = None
        node.right = None
        return released + 1

    def _calculate_height(self, node: Node | None) -> int:
        if node is None:
            return 0
        return 1 + max(self._calculate_height(node.left), self._calculate_height(node.right))
