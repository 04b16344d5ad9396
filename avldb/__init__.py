"""
AVL-tree indexed in-memory record store.

This package provides an ordered key/value index with:
- insert(record) - O(log N) with AVL rebalancing
- search(key) - O(log N) point lookup, None when absent
- delete_record(key, value) - O(log N), only when key and value both match
- range_query(start, end) - Records whose value lies in [start, end]
- get_tree_height() / get_search_comparisons(key) - Introspection
- clear_database() - Release every record
"""

from avldb.engine.database import IndexedDatabase
from avldb.models.record import Record
from avldb.models.sortedcontainers import AVLTree

__all__ = ["IndexedDatabase", "Record", "AVLTree"]
