"""
Shared pytest fixtures for the record index tests.
"""

import pytest

from avldb.engine.database import IndexedDatabase
from avldb.models.record import Record
from avldb.models.sortedcontainers import AVLTree
from avldb.models.sortedcontainers.avl_tree import Node


def assert_avl(node: Node | None) -> int:
    """Check balance and cached heights below node; return its true height."""
    if node is None:
        return 0
    left = assert_avl(node.left)
    right = assert_avl(node.right)
    assert abs(left - right) <= 1, f"unbalanced at {node.record.key!r}"
    assert node.height == 1 + max(left, right), f"stale height at {node.record.key!r}"
    return node.height


def in_order_keys(node: Node | None) -> list[str]:
    if node is None:
        return []
    return in_order_keys(node.left) + [node.record.key] + in_order_keys(node.right)


def count_nodes(node: Node | None) -> int:
    if node is None:
        return 0
    return 1 + count_nodes(node.left) + count_nodes(node.right)


@pytest.fixture
def tree():
    """Provide a fresh AVLTree instance."""
    return AVLTree()


@pytest.fixture
def database():
    """Provide an empty IndexedDatabase."""
    return IndexedDatabase()


@pytest.fixture
def sample_records():
    """Provide sample records whose key order matches value order."""
    return [
        Record("key1", 10),
        Record("key2", 20),
        Record("key3", 30),
    ]


@pytest.fixture
def large_sample_records():
    """Provide larger sample for stress testing."""
    return [Record(f"key{i:04d}", i) for i in range(1000)]
