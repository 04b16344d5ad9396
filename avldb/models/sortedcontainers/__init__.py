"""
Sorted container implementations for the record index.
"""

from avldb.models.sortedcontainers.avl_tree import AVLTree, Node

__all__ = ["AVLTree", "Node"]
